from __future__ import annotations

import re
from typing import Final, Optional

from .common import immutable

# two to four dot separated decimal components
_LEGACY_PATTERN: Final = re.compile(r"(\d+)\.(\d+)(?:\.(\d+))?(?:\.(\d+))?", re.ASCII)


@immutable
class LegacyVersion:
    """
    Four-field numeric version, 'major.minor.build.revision'. Omitted
    fields read as zero.
    """

    major: int
    minor: int
    build: int
    revision: int

    def __init__(
        self,
        major: int,
        minor: int,
        build: Optional[int] = None,
        revision: Optional[int] = None,
    ) -> None:
        # 'self' only collects the field values here, see 'immutable'
        self.major = major
        self.minor = minor
        self.build = 0 if build is None else build
        self.revision = 0 if revision is None else revision

    def __post_init__(self) -> None:
        for name in ("major", "minor", "build", "revision"):
            number = getattr(self, name)
            if isinstance(number, bool) or not isinstance(number, int):
                raise TypeError(f"{name} must be an int, got {type(number).__name__}")
            if number < 0:
                raise ValueError(f"{name} must be non-negative, got {number}")

    @staticmethod
    def parse(text: str, /) -> LegacyVersion:
        """Parses 'major.minor[.build[.revision]]'."""
        matched = _LEGACY_PATTERN.fullmatch(text.strip())
        if matched is None:
            raise ValueError(f"invalid version: {text!r}")

        fields = (int(group) if group is not None else None for group in matched.groups())
        return LegacyVersion(*fields)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.build}.{self.revision}"
