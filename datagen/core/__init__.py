"""
Core — models, settings, generation and file output. No console I/O here.
"""
