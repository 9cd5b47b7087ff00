"""
layout and rendering of genomic rearrangement profiles
"""
__version__ = '0.1.0'
