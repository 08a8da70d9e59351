"""URL-Builder includes a `url_builder.UrlBuilder` class that gives you a fluent interface to
compose URLs from a base, path segments, placeholder params and query entries.
"""

from __future__ import annotations

from copy import copy
from typing import Optional

from multidict import MultiDict
from yarl import URL

from .constants import DEFAULT_SCHEME, PATH_SEPARATOR, QUERY_SEPARATOR, UNSET_VALUES
from .errors import EmptyPathError, URLParseError
from .logs import logger
from .types import TSlots, TValue, TValues
from .utils import parse_query_string, slot_path, split_path, strip_placeholder, trim_path


class UrlBuilder:
    """Build and inspect URLs.

    .. code-block:: python

        url = (
            UrlBuilder.create_from_url("https://localhost:3000")
            .add_path("users/:userId/comments")
            .add_param("userId", 10)
            .add_query("page", 1)
        )
        assert url.to_string() == "https://localhost:3000/users/10/comments?page=1"

    :param scheme: URL scheme, ``https`` by default
    :param host: URL host, nothing is rendered before the path when empty
    :param port: URL port, rendered only when non-zero

    Builders are mutable local values: every mutator changes the instance in place
    and returns it. Instances are not safe to share between threads.
    """

    __slots__ = ("_scheme", "_host", "_port", "_paths", "_params", "_query")

    split_path = staticmethod(split_path)
    trim_path = staticmethod(trim_path)

    def __init__(
        self,
        *,
        scheme: str = DEFAULT_SCHEME,
        host: Optional[str] = None,
        port: Optional[int] = None,
    ):
        self._scheme = scheme
        self._host = host
        self._port = port

        # Segments are keyed by the slot they were split into
        self._paths: TSlots = {}
        self._params: MultiDict[TValue] = MultiDict()
        self._query: MultiDict[TValue] = MultiDict()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"<UrlBuilder '{self}'>"

    def __copy__(self) -> UrlBuilder:
        """Copy the builder to an independent one."""
        clone = self.__class__(scheme=self._scheme, host=self._host, port=self._port)
        clone._paths = dict(self._paths)
        clone._params = self._params.copy()
        clone._query = self._query.copy()
        return clone

    @classmethod
    def create(cls, **options) -> UrlBuilder:
        """Create an empty builder (``https`` scheme, no host, no port)."""
        return cls(**options)

    @classmethod
    def create_from_url(cls, base_url: str) -> UrlBuilder:
        """Parse the given URL string into a builder.

        The scheme is kept as ``https`` when the string has none (host-relative URLs).
        Path and query are taken raw: nothing is decoded or normalized.

        :raises URLParseError: when the string can not be decomposed into URL components
        """
        try:
            url = URL(base_url, encoded=True)
            host = url.raw_host
            port = url.explicit_port
        except (TypeError, ValueError) as exc:
            logger.debug("Failed to parse URL %r: %s", base_url, exc)
            raise URLParseError(f"Invalid URL: {base_url!r}") from exc

        if host and ":" in host:
            host = f"[{host}]"

        builder = cls(host=host or "", port=port)
        if url.scheme:
            builder._scheme = url.scheme

        builder._paths = slot_path(url.raw_path)
        for key, value in parse_query_string(url.raw_query_string):
            builder._query[key] = value

        logger.debug("Parsed URL %r", base_url)
        return builder

    def compare_to(self, other: UrlBuilder, relative: bool = True) -> bool:
        """Compare the builder with another one.

        :param relative: compare relative paths only (without query), otherwise compare
                         the full URLs
        """
        if relative:
            return self.get_relative_path() == other.get_relative_path()

        return self.to_string() == other.to_string()

    def get_scheme(self) -> str:
        return self._scheme

    def get_host(self) -> str:
        """Return the host, an empty string means that the host is not set."""
        return self._host or ""

    def get_port(self) -> int:
        """Return the port, ``0`` means that the port is not set."""
        return self._port or 0

    def get_paths(self) -> list[str]:
        """Return the raw path segments (placeholders are not substituted)."""
        return list(self._paths.values())

    def set_port(self, port: int) -> UrlBuilder:
        self._port = port
        return self

    def add_path(self, path: str) -> UrlBuilder:
        """Split the given path and append its segments."""
        for segment in split_path(path):
            slot = max(self._paths) + 1 if self._paths else 0
            self._paths[slot] = segment

        return self

    def add_param(self, key: str, value: TValue) -> UrlBuilder:
        self._params[key] = value
        return self

    def add_params(self, params: Optional[TValues] = None, **values: TValue) -> UrlBuilder:
        for key, value in dict(params or {}, **values).items():
            self._params[key] = value

        return self

    def get_params(self) -> dict[str, TValue]:
        return dict(self._params)

    def add_query(self, key: str, value: TValue) -> UrlBuilder:
        self._query[key] = value
        return self

    def add_queries(self, queries: Optional[TValues] = None, **values: TValue) -> UrlBuilder:
        for key, value in dict(queries or {}, **values).items():
            self._query[key] = value

        return self

    def get_query(self) -> dict[str, TValue]:
        return dict(self._query)

    def get_first_path(self) -> str:
        """Return the first path segment.

        :raises EmptyPathError: when the path is empty
        """
        if not self._paths:
            raise EmptyPathError("The path has no segments")

        return next(iter(self._paths.values()))

    def get_last_path(self) -> str:
        """Return the last path segment.

        :raises EmptyPathError: when the path is empty
        """
        if not self._paths:
            raise EmptyPathError("The path has no segments")

        return next(reversed(self._paths.values()))

    def get_parent(self, n: int = 1) -> UrlBuilder:
        """Return a new builder for the n-th ancestor of the URL.

        Every step removes all the segments equal to the last one, drops the params
        whose value equals the last segment's placeholder name and clears the query.
        The current builder is not changed. With ``n < 1`` a plain copy is returned.
        """
        parent = copy(self)
        for _ in range(n):
            parent._drop_last_path()

        logger.debug("Parent %d of %r is %r", n, self, parent)
        return parent

    def _drop_last_path(self):
        self._query = MultiDict()
        if not self._paths:
            return

        last = self.get_last_path()
        self._paths = {slot: segment for slot, segment in self._paths.items() if segment != last}

        name = strip_placeholder(last)
        self._params = MultiDict(
            [(key, value) for key, value in self._params.items() if value != name]
        )

    def get_between_2_words(self, a: str, b: str) -> Optional[str]:
        """Return the segment found at the position of the word `a` slot.

        Nothing is returned when any of the words is missing or sits in the first slot.
        """
        slot_a, slot_b = self._find_slot(a), self._find_slot(b)
        if not slot_a or not slot_b:
            return None

        segments = self.get_paths()[slot_a : slot_a + 1]
        return segments[0] if segments else None

    def _find_slot(self, word: str) -> Optional[int]:
        return next((slot for slot, segment in self._paths.items() if segment == word), None)

    def get_relative_path(self, include_query: bool = False) -> str:
        """Render the path with the params substituted.

        :param include_query: append the query string
        """
        segments = []
        for segment in self._paths.values():
            name = strip_placeholder(segment)
            value = self._params.get(name)
            segments.append(name if value in UNSET_VALUES else str(value))

        relative_path = f"{PATH_SEPARATOR}{PATH_SEPARATOR.join(segments)}" if segments else ""
        query_string = self.get_query_string()
        if include_query and query_string:
            return f"{relative_path}{query_string}"

        return relative_path

    def get_query_string(self) -> Optional[str]:
        """Render the query entries as ``?key=value&...``, ``None`` when there are none."""
        if not self._query:
            return None

        return "?" + QUERY_SEPARATOR.join(f"{key}={value}" for key, value in self._query.items())

    def to_string(self) -> str:
        base_url = f"{self._scheme}://{self._host}" if self._host else ""
        if self._port:
            base_url = f"{base_url}:{self._port}"

        return f"{base_url}{self.get_relative_path()}{self.get_query_string() or ''}"


def create(**options) -> UrlBuilder:
    """Create an empty builder."""
    return UrlBuilder.create(**options)


def create_from_url(base_url: str) -> UrlBuilder:
    """Parse the given URL string into a builder."""
    return UrlBuilder.create_from_url(base_url)


