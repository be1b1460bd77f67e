"""
Semantic Versioning 2.0.0 values, see https://semver.org/spec/v2.0.0.html.

A version is 'MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]'. Build metadata is
kept for display only: it never takes part in equality, hashing or
precedence.
"""
from __future__ import annotations

from dataclasses import field
from enum import IntEnum, unique
from typing import Any, Final, Optional

from result import Err, Ok, Result

from . import grammar
from .common import immutable, unwrap
from .error import FieldCountError, ParseError
from .legacy import LegacyVersion


@unique
class Ordering(IntEnum):
    """Result of a three-way comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @staticmethod
    def of(left: Any, right: Any, /) -> Ordering:
        if left < right:
            return Ordering.LESS
        elif left > right:
            return Ordering.GREATER
        else:
            return Ordering.EQUAL


@unique
class Preset(IntEnum):
    """Named field counts for 'Version.to_string'."""

    # Major.Minor.Patch-PreRelease+Build
    GENERAL = 5
    # Major.Minor.Patch
    NEUTRAL = 3


# format specs accepted by 'format(version, spec)'
_FORMAT_SPECS: Final = {
    "": Preset.GENERAL,
    "G": Preset.GENERAL,
    "N": Preset.NEUTRAL,
    **{str(level): level for level in range(1, 6)},
}


def _compare_identifiers(left: str, right: str, /) -> Ordering:
    """Precedence between two pre-release identifiers at the same position."""
    match grammar.is_numeric(left), grammar.is_numeric(right):
        case True, True:
            return Ordering.of(int(left), int(right))
        case True, False:
            # numeric identifiers always have lower precedence
            return Ordering.LESS
        case False, True:
            return Ordering.GREATER
        case _:
            return Ordering.of(left, right)


def _compare_pre_release(left: tuple[str, ...], right: tuple[str, ...], /) -> Ordering:
    for left_id, right_id in zip(left, right):
        if (ordering := _compare_identifiers(left_id, right_id)) is not Ordering.EQUAL:
            return ordering

    # equal so far, the larger set of fields wins
    return Ordering.of(len(left), len(right))


@immutable(eq=False)
class Version:
    """
    A semantic version.

    Equality compares 'pre_release' exactly, while precedence compares it
    case-insensitively, so 'Version(1, 0, 0, "RC")' and 'Version(1, 0, 0, "rc")'
    are different values with the same precedence.
    """

    major: int
    minor: int
    patch: int
    pre_release: Optional[str] = None
    build_metadata: Optional[str] = None
    # lower-cased pre-release identifiers, empty for normal versions
    _precedence_identifiers: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for name, number in (("major", self.major), ("minor", self.minor), ("patch", self.patch)):
            if isinstance(number, bool) or not isinstance(number, int):
                raise TypeError(f"{name} must be an int, got {type(number).__name__}")
            if number < 0:
                raise ValueError(f"{name} must be non-negative, got {number}")

        if self.pre_release is not None and not grammar.is_pre_release(self.pre_release):
            raise ValueError(f"invalid pre-release label: {self.pre_release!r}")
        if self.build_metadata is not None and not grammar.is_build_metadata(self.build_metadata):
            raise ValueError(f"invalid build metadata: {self.build_metadata!r}")

        identifiers = () if self.pre_release is None else tuple(self.pre_release.lower().split("."))
        object.__setattr__(self, "_precedence_identifiers", identifiers)

    # # # # # #
    # Parsing #

    @staticmethod
    def parse_result(text: Optional[str], /) -> Result[Version, ParseError]:
        """Parses text into a version, carrying failures as 'Err' instead of raising."""
        if not isinstance(text, str):
            return Err(ParseError(text))

        matched = grammar.match_version(text)
        if matched is None:
            return Err(ParseError(text))

        # the grammar only allows digits here
        major = int(matched.group("major"))
        minor = int(matched.group("minor"))
        patch = int(matched.group("patch"))

        return Ok(Version(major, minor, patch, matched.group("prerelease"), matched.group("buildmetadata")))

    @staticmethod
    def parse(text: Optional[str], /) -> Version:
        """Parses text into a version, raising 'ParseError' on invalid input."""
        return unwrap(Version.parse_result(text))

    @staticmethod
    def try_parse(text: Optional[str], /) -> tuple[bool, Optional[Version]]:
        """Parses text into a version, returning a success flag and the value."""
        match Version.parse_result(text):
            case Ok(version):
                return True, version
            case _:
                return False, None

    @staticmethod
    def from_legacy(legacy: LegacyVersion, /) -> Version:
        """
        Converts a 'major.minor.build.revision' version. The build number
        becomes the patch and the revision becomes the build metadata.
        """
        return Version(legacy.major, legacy.minor, legacy.build, None, str(legacy.revision))

    # # # # # # # #
    # Precedence  #

    def compare_to(self, other: Version | LegacyVersion, /) -> Ordering:
        """
        Precedence of this version relative to 'other':
        1. major, minor and patch are compared numerically, in that order;
        2. a pre-release version has lower precedence than a normal version;
        3. pre-release identifiers are compared left to right, numbers
           numerically and below any text, text in ASCII order ignoring case;
        4. when all shared identifiers are equal, more identifiers win.

        1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-alpha.beta < 1.0.0-beta
        < 1.0.0-beta.2 < 1.0.0-beta.11 < 1.0.0-rc.1 < 1.0.0

        'other' may also be a 'LegacyVersion', converted with 'from_legacy'.
        The operators '<', '<=', '>', '>=' and '==' only accept 'Version'
        operands and raise TypeError (or compare unequal) otherwise; convert
        explicitly to use them.
        """
        if isinstance(other, LegacyVersion):
            other = Version.from_legacy(other)
        elif not isinstance(other, Version):
            raise TypeError(f"cannot compare Version with {type(other).__name__}")

        core = Ordering.of((self.major, self.minor, self.patch), (other.major, other.minor, other.patch))
        if core is not Ordering.EQUAL:
            return core

        match self.pre_release, other.pre_release:
            case None, None:
                return Ordering.EQUAL
            case None, _:
                return Ordering.GREATER
            case _, None:
                return Ordering.LESS
            case _:
                return _compare_pre_release(self._precedence_identifiers, other._precedence_identifiers)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) >= 0

    @staticmethod
    def max(x: Version, y: Version, /) -> Version:
        """'x' if it has greater precedence than 'y', otherwise 'y'."""
        return x if x.compare_to(y) is Ordering.GREATER else y

    @staticmethod
    def min(x: Version, y: Version, /) -> Version:
        """'x' if it has lower precedence than 'y', otherwise 'y'."""
        return x if x.compare_to(y) is Ordering.LESS else y

    # # # # # # # # # # #
    # Equality and hash #

    def _identity(self) -> tuple[int, int, int, Optional[str]]:
        # build metadata is ignored
        return self.major, self.minor, self.patch, self.pre_release

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    # # # # # # # #
    # Formatting  #

    def to_string(self, level: int = Preset.GENERAL) -> str:
        """
        Text with up to 'level' fields:
            1: Major
            2: Major.Minor
            3: Major.Minor.Patch
            4: Major.Minor.Patch-PreRelease, or Major.Minor.Patch+Build without pre-release
            5: Major.Minor.Patch-PreRelease+Build
        """
        if isinstance(level, bool) or not isinstance(level, int):
            raise TypeError(f"field count must be an int, got {type(level).__name__}")

        match level:
            case 1:
                return f"{self.major}"
            case 2:
                return f"{self.major}.{self.minor}"
            case 3:
                return f"{self.major}.{self.minor}.{self.patch}"
            case 4:
                # pre-release XOR build metadata, never both
                if self.pre_release is not None:
                    return f"{self.to_string(3)}-{self.pre_release}"
                elif self.build_metadata is not None:
                    return f"{self.to_string(3)}+{self.build_metadata}"
                else:
                    return self.to_string(3)
            case 5:
                text = self.to_string(3)
                if self.pre_release is not None:
                    text += f"-{self.pre_release}"
                if self.build_metadata is not None:
                    text += f"+{self.build_metadata}"
                return text
            case _:
                raise FieldCountError(level)

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str, /) -> str:
        try:
            level = _FORMAT_SPECS[format_spec]
        except KeyError:
            raise ValueError(f"{format_spec!r} is not a valid format for Version") from None

        return self.to_string(level)


# functional aliases
parse = Version.parse
parse_result = Version.parse_result
try_parse = Version.try_parse
from_legacy = Version.from_legacy
max_version = Version.max
min_version = Version.min


def compare(a: Version, b: Version | LegacyVersion, /) -> Ordering:
    """Three-way precedence comparison, see 'Version.compare_to'."""
    if not isinstance(a, Version):
        raise TypeError(f"cannot compare {type(a).__name__} with Version")
    return a.compare_to(b)
