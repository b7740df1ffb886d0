"""
datagen — write files of random integers or floats from an interactive prompt.
"""

__version__ = "0.1.0"
