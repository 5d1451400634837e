#!/usr/bin/env python3
"""
Argon2 variant and version identifiers.

The hash string carries the variant as a literal tag ("argon2i" or
"argon2id") and the version as the decimal token ``13``. Internally the
version is the Argon2 version constant 0x13. The functions below convert
between wire tokens and enum members and reject anything unrecognized.

Usage:
    >>> from argonhash.modes import Variant, Version, variant_from_token, version_token
    >>> variant_from_token("argon2id") is Variant.ARGON2ID
    True
    >>> version_token(Version.V13)
    13
"""

from enum import Enum, IntEnum

from .errors import InvalidModeError, InvalidVersionError


class Variant(str, Enum):
    """
    Argon2 mixing strategies understood by the hash format.

    Members compare equal to their wire tag, so ``Variant.ARGON2ID ==
    "argon2id"`` holds.
    """
    ARGON2I = "argon2i"
    ARGON2ID = "argon2id"

    def __str__(self) -> str:
        return self.value


class Version(IntEnum):
    """Supported Argon2 versions, valued by their algorithm constant."""
    V13 = 0x13


# Wire token for each version; 0x13 travels as "13".
_VERSION_TOKENS = {Version.V13: 13}

DEFAULT_VARIANT = Variant.ARGON2ID
DEFAULT_VERSION = _VERSION_TOKENS[Version.V13]


def variant_from_token(token: str) -> Variant:
    """Return the variant for a hash-string tag or raise InvalidModeError."""
    try:
        return Variant(token)
    except ValueError:
        raise InvalidModeError(details={"variant": token}) from None


def variant_token(variant) -> str:
    """Return the tag written into a hash string for ``variant``."""
    if isinstance(variant, Variant):
        return variant.value
    return str(variant)


def version_token(version: Version) -> int:
    return _VERSION_TOKENS[version]


def version_from_token(token: int) -> Version:
    """Return the version for a decimal wire token or raise InvalidVersionError."""
    for version, value in _VERSION_TOKENS.items():
        if value == token:
            return version
    raise InvalidVersionError(details={"version": token})


def supported_variants():
    return [variant.value for variant in Variant]
