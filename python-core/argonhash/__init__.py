"""
argonhash - Argon2 password hashing with self-describing hash strings.

Modules:
    config: ArgonConfig parameter set, hash creation and verification
    codec: Hash string encoding/decoding and strict unpadded base64
    kdf: Argon2 derivation (argon2-cffi) and secure salt generation
    modes: Variant and version identifiers
    errors: Exception hierarchy

Usage:
    >>> from argonhash import ArgonConfig
    >>> hash_string = ArgonConfig.default().create_hash("foo")
    >>> argon = ArgonConfig.from_hash(hash_string)
    >>> argon.match("foo"), argon.match("bar")
    (True, False)
"""

from .config import ArgonConfig, hash_password, verify_password
from .codec import DecodedHash, decode, encode
from .modes import Variant, Version
from .errors import (
    ArgonError,
    SaltNotFoundError,
    KeyNotFoundError,
    InvalidHashError,
    InvalidVersionError,
    InvalidModeError,
    InvalidArgonConfigError,
    FormatMismatchError,
    Base64DecodeError,
)

__all__ = [
    # Parameter set
    "ArgonConfig",
    "hash_password",
    "verify_password",
    # Codec
    "DecodedHash",
    "decode",
    "encode",
    # Identifiers
    "Variant",
    "Version",
    # Errors
    "ArgonError",
    "SaltNotFoundError",
    "KeyNotFoundError",
    "InvalidHashError",
    "InvalidVersionError",
    "InvalidModeError",
    "InvalidArgonConfigError",
    "FormatMismatchError",
    "Base64DecodeError",
]

__version__ = "1.0.0"
