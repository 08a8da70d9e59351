from __future__ import annotations

from typing import Final


class Scheme:
    """Well known URL schemes."""

    HTTP: Final = "http"
    HTTPS: Final = "https"
    WS: Final = "ws"
    WSS: Final = "wss"


DEFAULT_SCHEME: Final = Scheme.HTTPS
PLACEHOLDER_PREFIX: Final = ":"
PATH_SEPARATOR: Final = "/"
QUERY_SEPARATOR: Final = "&"

# Param values that leave a placeholder unsubstituted
UNSET_VALUES: Final = (None, "", 0, "0")
