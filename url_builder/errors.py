from __future__ import annotations


class URLBuilderError(Exception):
    """Base class for URL-Builder Errors."""


class URLParseError(URLBuilderError, ValueError):
    """Raise when a string can not be decomposed into URL components."""


class EmptyPathError(URLBuilderError, IndexError):
    """Raise when a path segment is requested from an empty path."""
