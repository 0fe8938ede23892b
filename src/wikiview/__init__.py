"""Terminal client for searching and reading Confluence wiki pages."""

__version__ = "0.1.0"
