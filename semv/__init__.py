from __future__ import annotations

from typing import Final

from .error import FieldCountError, ParseError
from .legacy import LegacyVersion
from .version import (
    Ordering,
    Preset,
    Version,
    compare,
    from_legacy,
    max_version,
    min_version,
    parse,
    parse_result,
    try_parse,
)

__version__: Final = "0.1.0"

version_info: Final = Version.parse(__version__)

__all__ = [
    "FieldCountError",
    "LegacyVersion",
    "Ordering",
    "ParseError",
    "Preset",
    "Version",
    "compare",
    "from_legacy",
    "max_version",
    "min_version",
    "parse",
    "parse_result",
    "try_parse",
    "version_info",
]
