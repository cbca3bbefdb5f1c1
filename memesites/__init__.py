"""
memesites - read MEME motif sites as sequence alignments
"""

__version__ = '0.1.0'
