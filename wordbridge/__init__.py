"""
wordbridge
A weighted directed graph ADT with interchangeable representations, and
a corpus-driven poem generator that inserts bridge words between
adjacent input words.
"""

__version__ = "0.1.0"
