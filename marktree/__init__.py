"""A mutable Markdown syntax tree with autolink detection and inline scanning helpers."""

__version__ = "0.1.0"