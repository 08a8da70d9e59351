from __future__ import annotations

from typing import Mapping, Union

TValue = Union[str, int]
TValues = Mapping[str, TValue]
TSlots = dict[int, str]
