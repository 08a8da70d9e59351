from __future__ import annotations

import logging

logger: logging.Logger = logging.getLogger("url_builder")
