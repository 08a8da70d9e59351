""" URL-Builder -- A fluent builder to compose and inspect URLs """
from __future__ import annotations

from .builder import UrlBuilder, create, create_from_url
from .constants import DEFAULT_SCHEME, Scheme
from .errors import EmptyPathError, URLBuilderError, URLParseError
from .utils import split_path, trim_path

__all__ = (
    # Errors
    "EmptyPathError",
    "URLBuilderError",
    "URLParseError",
    # Builder
    "UrlBuilder",
    "create",
    "create_from_url",
    # Constants
    "DEFAULT_SCHEME",
    "Scheme",
    # Utils
    "split_path",
    "trim_path",
)
