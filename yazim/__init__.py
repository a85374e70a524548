"""
Yazım: Turkish spelling validation and suggestion service.
"""

__version__ = "0.1.0"
