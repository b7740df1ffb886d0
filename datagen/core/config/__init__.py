"""
Configuration — optional datagen.yml settings.
"""
