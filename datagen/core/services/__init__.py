"""
Services — value generation and data file writing.
"""
