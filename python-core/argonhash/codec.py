#!/usr/bin/env python3
"""
Hash string codec.

A hash string is six '$' separated segments, the first one empty:

    $<variant>$v=<version>$m=<memory>,t=<time>,p=<parallelism>$<salt>$<key>

``variant`` is "argon2i" or "argon2id", ``version`` is the decimal token 13,
and salt and key are standard base64 without padding. The layout and field
order are fixed; encoding the same parameters always gives the same bytes.

Decoding validates segments strictly in order and raises on the first
problem:

    - wrong segment count                 -> InvalidHashError
    - unknown variant tag                 -> InvalidModeError
    - version segment malformed           -> FormatMismatchError
    - unsupported version                 -> InvalidVersionError
    - cost segment malformed              -> FormatMismatchError
    - salt or key not canonical base64    -> Base64DecodeError

Compatibility:
    The version token is 13, not the PHC string format's 19, so standard
    Argon2 PHC parsers do not accept these strings unchanged. Numeric
    fields accept leading zeros; values past their range (32 bits, 8 bits
    for parallelism) are rejected before conversion.

Example:
    >>> decoded = decode("$argon2id$v=13$m=65536,t=1,p=2$c2FsdHNhbHQ$a2V5")
    >>> decoded.memory_cost, decoded.salt
    (65536, b'saltsalt')
"""

import base64
import logging
import re
import string
from typing import NamedTuple, Union

from .errors import (
    Base64DecodeError,
    FormatMismatchError,
    InvalidHashError,
    KeyNotFoundError,
    SaltNotFoundError,
)
from .modes import Variant, variant_from_token, variant_token, version_from_token

logger = logging.getLogger(__name__)

SEGMENTS_LENGTH = 6
SEPARATOR = "$"

UINT8_MAX = 0xFF
UINT32_MAX = 0xFFFFFFFF

_VERSION_PATTERN = re.compile(r"v=(\d+)", re.ASCII)
_PARAMS_PATTERN = re.compile(r"m=(\d+),t=(\d+),p=(\d+)", re.ASCII)

_B64_ALPHABET = frozenset(string.ascii_letters + string.digits + "+/")


class DecodedHash(NamedTuple):
    """Parameters, salt and key recovered from a hash string."""
    variant: Variant
    version: int
    memory_cost: int
    time_cost: int
    parallelism: int
    salt: bytes
    key: bytes


# ============================================================================
# Strict unpadded base64
# ============================================================================

def b64encode_raw(data: bytes) -> str:
    """Standard base64 with the '=' padding removed."""
    return base64.b64encode(data).decode("ascii").rstrip("=")


def b64decode_strict(text: str) -> bytes:
    """
    Decode standard base64 written without padding, accepting only the
    canonical encoding of each byte string.

    Raises:
        Base64DecodeError: With the offset of the first offending input
            byte. Characters outside the alphabet (padding, whitespace
            included) are reported at their own position; a lone trailing
            character at its position; non-zero trailing bits at the
            start of a two-character final group or at the last
            character of a three-character one.

    Note:
        ``\\r`` and ``\\n`` are rejected like any other character outside
        the alphabet. Go's ``RawStdEncoding.Strict()`` skips them instead,
        so a hash string with a line break inside salt or key fails here.
    """
    for index, char in enumerate(text):
        if char not in _B64_ALPHABET:
            raise Base64DecodeError(index)

    remainder = len(text) % 4
    if remainder == 1:
        raise Base64DecodeError(len(text) - 1)

    data = base64.b64decode(text + "=" * (-len(text) % 4))
    if b64encode_raw(data) != text:
        # Only non-zero trailing bits can make the re-encoding differ.
        raise Base64DecodeError(len(text) - 1 if remainder == 3 else len(text) - 2)
    return data


# ============================================================================
# Hash string
# ============================================================================

def encode(config) -> bytes:
    """
    Render ``config`` as a hash string.

    ``config`` is anything exposing ``variant``, ``version``,
    ``memory_cost``, ``time_cost``, ``parallelism``, ``salt`` and ``key``.

    Raises:
        SaltNotFoundError: If ``config.salt`` is None
        KeyNotFoundError: If ``config.key`` is None
    """
    if config.salt is None:
        raise SaltNotFoundError()
    if config.key is None:
        raise KeyNotFoundError()

    hash_string = (
        f"{SEPARATOR}{variant_token(config.variant)}"
        f"{SEPARATOR}v={int(config.version)}"
        f"{SEPARATOR}m={int(config.memory_cost)},t={int(config.time_cost)},p={int(config.parallelism)}"
        f"{SEPARATOR}{b64encode_raw(config.salt)}"
        f"{SEPARATOR}{b64encode_raw(config.key)}"
    )
    return hash_string.encode("ascii")


def _parse_uint(digits: str, maximum: int) -> int:
    # Reject by length first so int() never sees an oversized digit string.
    if len(digits.lstrip("0")) > len(str(maximum)):
        raise FormatMismatchError("value out of range")
    value = int(digits)
    if value > maximum:
        raise FormatMismatchError("value out of range")
    return value


def decode(hash_string: Union[str, bytes]) -> DecodedHash:
    """
    Parse and validate a hash string.

    Args:
        hash_string: Hash string as ``str`` or ASCII ``bytes``

    Returns:
        DecodedHash with every field populated

    Raises:
        InvalidHashError, InvalidModeError, InvalidVersionError,
        FormatMismatchError, Base64DecodeError (see module docstring)
    """
    if isinstance(hash_string, (bytes, bytearray)):
        try:
            hash_string = bytes(hash_string).decode("ascii")
        except UnicodeDecodeError:
            raise InvalidHashError(details={"reason": "non-ascii input"}) from None

    segments = hash_string.split(SEPARATOR)
    if len(segments) != SEGMENTS_LENGTH:
        raise InvalidHashError(details={"segments": len(segments)})

    variant = variant_from_token(segments[1])

    match = _VERSION_PATTERN.fullmatch(segments[2])
    if match is None:
        raise FormatMismatchError()
    version = _parse_uint(match.group(1), UINT32_MAX)
    version_from_token(version)

    match = _PARAMS_PATTERN.fullmatch(segments[3])
    if match is None:
        raise FormatMismatchError()
    memory_cost = _parse_uint(match.group(1), UINT32_MAX)
    time_cost = _parse_uint(match.group(2), UINT32_MAX)
    parallelism = _parse_uint(match.group(3), UINT8_MAX)

    salt = b64decode_strict(segments[4])
    key = b64decode_strict(segments[5])

    logger.debug(
        f"Decoded {variant.value} hash (m={memory_cost}, t={time_cost}, "
        f"p={parallelism}, salt={len(salt)}B, key={len(key)}B)"
    )
    return DecodedHash(
        variant=variant,
        version=version,
        memory_cost=memory_cost,
        time_cost=time_cost,
        parallelism=parallelism,
        salt=salt,
        key=key,
    )
