# tag_browser/__init__.py
"""HTML tag reference browser: catalog, filters and list/detail views."""

__version__ = "0.1.0"
