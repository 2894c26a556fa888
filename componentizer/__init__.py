"""
Componentizer - ordered component templates with a suffix-based template hierarchy.
"""

__version__ = "0.1.0"
