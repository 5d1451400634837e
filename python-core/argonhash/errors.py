#!/usr/bin/env python3
"""
Error types for argonhash.

Every failure of encoding, decoding or verification is reported as one of
the exceptions below. The ``ArgonError`` family covers the configuration
and hash-format taxonomy; malformed numeric segments and corrupt base64 are
kept outside of it so callers can tell them apart.

Error Hierarchy:
- ArgonError: base class, carries ``message``, ``code`` and ``details``
  - SaltNotFoundError (2001), KeyNotFoundError (2002)
  - InvalidHashError (2003), InvalidVersionError (2004)
  - InvalidModeError (2005), InvalidArgonConfigError (2006)
- FormatMismatchError: a ``ValueError`` for malformed numeric segments
- Base64DecodeError: a ``binascii.Error`` with the offending byte offset

Example Usage:
    >>> from argonhash import ArgonConfig
    >>> from argonhash.errors import ArgonError
    >>> try:
    ...     ArgonConfig.from_hash("$argon2d$v=13$m=1,t=1,p=1$YQ$YQ")
    ... except ArgonError as e:
    ...     print(e.code, e)
    2005 argon mode not supported
"""

import binascii
from typing import Any, Dict, Optional


class ArgonError(Exception):
    """
    Base exception for argonhash configuration and hash-format errors.

    Attributes:
        message: Human readable description
        code: Numeric error code, stable per subclass
        details: Extra context (never contains salt, key or password)
    """

    default_message = "argon error"
    default_code: Optional[int] = None

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class SaltNotFoundError(ArgonError):
    """Raised when encoding a config that has no salt."""
    default_message = "salt not found"
    default_code = 2001


class KeyNotFoundError(ArgonError):
    """Raised when encoding a config that has no derived key."""
    default_message = "key not found"
    default_code = 2002


class InvalidHashError(ArgonError):
    """Raised when a hash string does not have six '$' separated segments."""
    default_message = "invalid hash format"
    default_code = 2003


class InvalidVersionError(ArgonError):
    """Raised when the version segment names an unsupported version."""
    default_message = "argon version not supported"
    default_code = 2004


class InvalidModeError(ArgonError):
    """Raised when the variant segment is neither argon2i nor argon2id."""
    default_message = "argon mode not supported"
    default_code = 2005


class InvalidArgonConfigError(ArgonError):
    """Raised when matching against a config without salt or key."""
    default_message = "invalid argon config"
    default_code = 2006


class FormatMismatchError(ValueError):
    """A version or cost segment does not match its expected layout."""

    def __init__(self, message: str = "input does not match format"):
        super().__init__(message)
        self.message = message


class Base64DecodeError(binascii.Error):
    """Strict unpadded base64 decoding failed at ``offset``."""

    def __init__(self, offset: int):
        super().__init__(f"illegal base64 data at input byte {offset}")
        self.offset = offset
