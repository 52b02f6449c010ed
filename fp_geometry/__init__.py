"""
fp-geometry — generic 2D point algebra over pluggable algebraic structures.
"""

__version__ = "0.1.0"
