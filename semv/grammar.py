from __future__ import annotations

import re
from typing import Final

# # # # # # # # # #
# Building blocks #

# numbers never have leading zeros
NUMERIC_IDENTIFIER: Final = r"0|[1-9]\d*"
# at least one letter or hyphen, anywhere
ALPHANUMERIC_IDENTIFIER: Final = r"\d*[a-zA-Z-][0-9a-zA-Z-]*"
# build metadata allows leading zeros
BUILD_IDENTIFIER: Final = r"[0-9a-zA-Z-]+"

PRE_RELEASE_IDENTIFIER: Final = rf"(?:{NUMERIC_IDENTIFIER}|{ALPHANUMERIC_IDENTIFIER})"


def _dotted(identifier: str, /) -> str:
    """One or more identifiers separated by dots."""
    return rf"{identifier}(?:\.{identifier})*"


# # # # # # # # # # #
# Complete versions #

VERSION: Final = rf"""
    (?P<major>{NUMERIC_IDENTIFIER})
    \.
    (?P<minor>{NUMERIC_IDENTIFIER})
    \.
    (?P<patch>{NUMERIC_IDENTIFIER})
    (?:
        -(?P<prerelease>{_dotted(PRE_RELEASE_IDENTIFIER)})
    )?
    (?:
        \+(?P<buildmetadata>{_dotted(BUILD_IDENTIFIER)})
    )?
"""

_FLAGS: Final = re.VERBOSE | re.ASCII

version_pattern: Final = re.compile(VERSION, _FLAGS)
pre_release_pattern: Final = re.compile(_dotted(PRE_RELEASE_IDENTIFIER), _FLAGS)
build_metadata_pattern: Final = re.compile(_dotted(BUILD_IDENTIFIER), _FLAGS)
_numeric_pattern: Final = re.compile(r"\d+", _FLAGS)


def match_version(text: str, /) -> re.Match[str] | None:
    """Anchored match of a complete version string."""
    return version_pattern.fullmatch(text)


def is_pre_release(label: str, /) -> bool:
    return pre_release_pattern.fullmatch(label) is not None


def is_build_metadata(label: str, /) -> bool:
    return build_metadata_pattern.fullmatch(label) is not None


def is_numeric(identifier: str, /) -> bool:
    """Identifiers made only of ASCII digits are compared as numbers."""
    return _numeric_pattern.fullmatch(identifier) is not None
