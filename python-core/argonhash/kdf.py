#!/usr/bin/env python3
"""
Argon2 key derivation and salt generation.

This module is the boundary to the two external collaborators of
argonhash: the Argon2 computation itself, provided by argon2-cffi's
low-level bindings, and the operating system's secure random source,
reached through ``secrets``.

Both functions are stateless and safe to call from several threads.
Derivation is CPU and memory bound and cannot be interrupted once it
has started.

Variant Selection:
    ``Variant.ARGON2ID`` derives with Argon2id. Every other value,
    including unknown strings, derives with Argon2i. Derivation does not
    validate the variant; only decoding a hash string does.

Security Considerations:
    - Salts come only from ``secrets.token_bytes``; a failing random
      source raises ``OSError`` and is never replaced by a weaker one
    - argon2-cffi enforces the reference implementation's minimums: salts
      shorter than 8 bytes and ``memory_cost < 8 * parallelism`` raise
      ``argon2.exceptions.HashingError``
    - Passwords and derived keys are never logged

Dependencies:
    - argon2-cffi: native Argon2 implementation (``hash_secret_raw``)
    - secrets: cryptographically secure random bytes
"""

import logging
import secrets
from typing import Union

from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

from .modes import Variant

logger = logging.getLogger(__name__)


def _argon2_type(variant) -> Type:
    if variant == Variant.ARGON2ID:
        return Type.ID
    return Type.I


def derive_key(
    password: Union[str, bytes],
    salt: bytes,
    time_cost: int,
    memory_cost: int,
    parallelism: int,
    key_length: int,
    variant,
) -> bytes:
    """
    Derive a raw Argon2 key.

    Args:
        password: Secret to stretch; ``str`` is encoded as UTF-8
        salt: Salt bytes
        time_cost: Number of passes over memory
        memory_cost: Memory usage in KiB
        parallelism: Number of lanes
        key_length: Length of the derived key in bytes
        variant: ``Variant.ARGON2ID`` for Argon2id, anything else for Argon2i

    Returns:
        ``key_length`` bytes of derived key material

    Raises:
        argon2.exceptions.HashingError: If argon2 rejects the parameters
            (for example a salt shorter than 8 bytes)
    """
    if isinstance(password, str):
        password = password.encode("utf-8")

    argon2_type = _argon2_type(variant)
    logger.debug(
        f"Deriving {key_length}-byte key with {argon2_type.name} "
        f"(m={memory_cost}, t={time_cost}, p={parallelism})"
    )
    return hash_secret_raw(
        secret=password,
        salt=salt,
        time_cost=time_cost,
        memory_cost=memory_cost,
        parallelism=parallelism,
        hash_len=key_length,
        type=argon2_type,
        version=ARGON2_VERSION,
    )


def generate_salt(length: int) -> bytes:
    """Return ``length`` cryptographically secure random bytes."""
    salt = secrets.token_bytes(length)
    logger.debug(f"Generated {length}-byte salt")
    return salt
