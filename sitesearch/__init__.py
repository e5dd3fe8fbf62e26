"""
sitesearch - incremental search controller for a content site.
"""

__version__ = "0.1.0"
