"""URL-Builder Utils."""

from __future__ import annotations

from .constants import PATH_SEPARATOR, PLACEHOLDER_PREFIX, QUERY_SEPARATOR
from .types import TSlots


def split_path(path: str) -> list[str]:
    """Split the given path into segments, empty segments are dropped.

    .. code-block:: python

        assert split_path("/users//10/") == ["users", "10"]

    """
    return [segment for segment in path.split(PATH_SEPARATOR) if segment]


def trim_path(path: str) -> str:
    """Remove leading, trailing and duplicate slashes from the given path."""
    return PATH_SEPARATOR.join(split_path(path))


def slot_path(path: str) -> TSlots:
    """Split the given path and keep the position of every non-empty segment."""
    return {
        slot: segment for slot, segment in enumerate(path.split(PATH_SEPARATOR)) if segment
    }


def parse_query_string(query_string: str) -> list[tuple[str, str]]:
    """Split a raw query string into key/value pairs.

    Pairs are split on the first ``=``, a pair without ``=`` gets an empty value.
    Values are kept as is (no percent-decoding).
    """
    pairs = []
    for pair in query_string.split(QUERY_SEPARATOR):
        if not pair:
            continue

        key, _, value = pair.partition("=")
        pairs.append((key, value))

    return pairs


def strip_placeholder(segment: str) -> str:
    """Return the placeholder name for the given segment (drop the leading colon)."""
    if segment.startswith(PLACEHOLDER_PREFIX):
        return segment[len(PLACEHOLDER_PREFIX) :]

    return segment
