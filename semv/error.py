from __future__ import annotations

from typing import Any


class ParseError(ValueError):
    """Text that is not a valid semantic version."""

    def __init__(self, text: Any, /) -> None:
        super().__init__(f"invalid semantic version: {text!r}")
        self.text = text


class FieldCountError(ValueError):
    """Format level outside the range 1 to 5."""

    def __init__(self, level: int, /) -> None:
        super().__init__(f"field count must be between 1 and 5 inclusive, got {level}")
        self.level = level
