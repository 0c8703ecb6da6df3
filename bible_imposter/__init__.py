"""
Bible Imposter: a pass-the-device party game.
"""

__version__ = "1.0.0"
