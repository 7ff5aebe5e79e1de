"""
bix - inspect and patch binary files at byte granularity.
"""

__version__ = "0.1.0"
