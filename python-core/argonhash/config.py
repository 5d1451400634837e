#!/usr/bin/env python3
"""
Argon2 password hashing configuration.

``ArgonConfig`` holds one set of Argon2 parameters together with the salt
and derived key they produced. It is created either from defaults and
tuned with chainable setters, or rebuilt from an existing hash string:

    >>> from argonhash import ArgonConfig
    >>> hash_string = ArgonConfig.default().set_time(2).create_hash("foo")
    >>> ArgonConfig.from_hash(hash_string).match("foo")
    True

Lifecycle:
    - ``create_hash`` generates a salt when none is set, derives the key
      and stores both on the instance before returning the hash string.
    - ``from_hash`` returns a fully populated instance; nothing is derived
      until ``match`` is called.

Setters never validate. Bad parameters surface when encoding, decoding or
deriving. In particular the variant is only checked when decoding; a
config whose variant is anything other than ``Variant.ARGON2ID`` derives
with Argon2i.

Security Considerations:
    - ``match`` compares keys with ``hmac.compare_digest``; a key of a
      different length simply fails to match
    - ``repr`` reports only whether salt and key are set, never their bytes
    - A hash string that decodes cleanly can still carry parameters argon2
      refuses (salt under 8 bytes, too little memory for its lanes); such
      strings raise ``argon2.exceptions.HashingError`` from ``match``

Thread Safety:
    ``create_hash`` and ``match`` read and write the instance's salt and
    key. Share an instance between threads only with external locking, or
    give each thread its own config.

Dependencies:
    - argon2-cffi (through ``kdf``): key derivation
    - hmac: constant-time key comparison
"""

import hmac
import logging
from dataclasses import dataclass
from typing import Optional, Union

from . import codec, kdf
from .errors import InvalidArgonConfigError
from .modes import DEFAULT_VARIANT, DEFAULT_VERSION, Variant

logger = logging.getLogger(__name__)


@dataclass
class ArgonConfig:
    """
    Argon2 parameters plus the salt and key of one hash.

    Attributes:
        time_cost: Number of passes over memory
        memory_cost: Memory usage in KiB
        parallelism: Number of lanes (0-255 on the wire)
        salt_length: Salt size used when a salt has to be generated
        key_length: Size of the derived key in bytes
        variant: ``Variant.ARGON2ID`` or ``Variant.ARGON2I``
        version: Version token written to the hash string (13)
        salt: Salt bytes, None until generated, supplied or decoded
        key: Derived key bytes, None until derived or decoded
    """
    time_cost: int = 1
    memory_cost: int = 64 * 1024
    parallelism: int = 2
    salt_length: int = 16
    key_length: int = 32
    variant: Union[Variant, str] = DEFAULT_VARIANT
    version: int = DEFAULT_VERSION
    salt: Optional[bytes] = None
    key: Optional[bytes] = None

    @classmethod
    def default(cls) -> 'ArgonConfig':
        """Get default configuration: Argon2id, 64 MiB, one pass, two lanes."""
        return cls()

    @classmethod
    def from_hash(cls, hash_string: Union[str, bytes]) -> 'ArgonConfig':
        """
        Rebuild a config from a hash string produced by ``create_hash``.

        Salt and key lengths are taken from the decoded bytes.

        Raises:
            InvalidHashError: If the string has the wrong number of segments
            InvalidModeError: If the variant tag is unknown
            InvalidVersionError: If the version is not 13
            FormatMismatchError: If the version or cost segment is malformed
            Base64DecodeError: If salt or key is not canonical unpadded base64
        """
        decoded = codec.decode(hash_string)
        return cls(
            time_cost=decoded.time_cost,
            memory_cost=decoded.memory_cost,
            parallelism=decoded.parallelism,
            salt_length=len(decoded.salt),
            key_length=len(decoded.key),
            variant=decoded.variant,
            version=decoded.version,
            salt=decoded.salt,
            key=decoded.key,
        )

    # ------------------------------------------------------------------
    # Fluent setters
    # ------------------------------------------------------------------

    def set_time(self, time_cost: int) -> 'ArgonConfig':
        self.time_cost = time_cost
        return self

    def set_memory(self, memory_cost: int) -> 'ArgonConfig':
        self.memory_cost = memory_cost
        return self

    def set_parallelism(self, parallelism: int) -> 'ArgonConfig':
        self.parallelism = parallelism
        return self

    def set_salt_length(self, salt_length: int) -> 'ArgonConfig':
        self.salt_length = salt_length
        return self

    def set_key_length(self, key_length: int) -> 'ArgonConfig':
        self.key_length = key_length
        return self

    def set_variant(self, variant) -> 'ArgonConfig':
        self.variant = variant
        return self

    def set_version(self, version: int) -> 'ArgonConfig':
        self.version = version
        return self

    def set_salt(self, salt: bytes) -> 'ArgonConfig':
        """Use a caller supplied salt instead of a generated one."""
        self.salt = bytes(salt)
        self.salt_length = len(self.salt)
        return self

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def is_encodable(self) -> bool:
        return self.salt is not None and self.key is not None

    @property
    def is_verifiable(self) -> bool:
        return self.salt is not None and self.key is not None

    def __repr__(self) -> str:
        return (
            f"ArgonConfig(variant={self.variant!s}, version={self.version}, "
            f"time_cost={self.time_cost}, memory_cost={self.memory_cost}, "
            f"parallelism={self.parallelism}, salt_length={self.salt_length}, "
            f"key_length={self.key_length}, "
            f"salt={'set' if self.salt is not None else None}, "
            f"key={'set' if self.key is not None else None})"
        )

    # ------------------------------------------------------------------
    # Hashing and verification
    # ------------------------------------------------------------------

    def _derive(self, password: Union[str, bytes]) -> bytes:
        return kdf.derive_key(
            password,
            self.salt,
            self.time_cost,
            self.memory_cost,
            self.parallelism,
            self.key_length,
            self.variant,
        )

    def create_hash(self, password: Union[str, bytes]) -> bytes:
        """
        Hash ``password`` and return the encoded hash string.

        A salt of ``salt_length`` random bytes is generated unless one is
        already set. The salt and derived key are stored on the instance.

        Args:
            password: Password as ``str`` (UTF-8) or ``bytes``

        Returns:
            ASCII hash string as bytes

        Raises:
            OSError: If the system random source fails
            argon2.exceptions.HashingError: If argon2 rejects the parameters
        """
        if self.salt is None:
            self.salt = kdf.generate_salt(self.salt_length)

        self.key = self._derive(password)
        logger.debug(f"Created {self.variant!s} hash with {len(self.salt)}-byte salt")
        return self.encode()

    def encode(self) -> bytes:
        """
        Encode this config as a hash string.

        Raises:
            SaltNotFoundError: If no salt is set
            KeyNotFoundError: If no key is set
        """
        return codec.encode(self)

    def match(self, password: Union[str, bytes]) -> bool:
        """
        Check ``password`` against the stored key.

        The key is re-derived with this config's parameters and salt and
        compared in constant time. A wrong password returns False.

        Raises:
            InvalidArgonConfigError: If salt or key is missing
            argon2.exceptions.HashingError: If argon2 rejects the stored
                parameters. argon2 needs a salt of at least 8 bytes and
                ``memory_cost >= 8 * parallelism``; hash strings that
                decode cleanly but break these limits cannot be verified.
        """
        if self.salt is None or self.key is None:
            raise InvalidArgonConfigError()

        key = self._derive(password)
        return hmac.compare_digest(self.key, key)


def hash_password(password: Union[str, bytes], config: Optional[ArgonConfig] = None) -> str:
    """Hash ``password`` with ``config`` (defaults when omitted) and return the string."""
    config = config or ArgonConfig.default()
    return config.create_hash(password).decode("ascii")


def verify_password(hash_string: Union[str, bytes], password: Union[str, bytes]) -> bool:
    return ArgonConfig.from_hash(hash_string).match(password)
