"""
Unit Tests for argonhash key derivation, salt generation and identifiers
"""

import sys
from pathlib import Path

import pytest
from argon2.exceptions import HashingError
from argon2.low_level import Type, hash_secret_raw

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'python-core'))

from argonhash import kdf
from argonhash.errors import InvalidModeError, InvalidVersionError
from argonhash.modes import (
    Variant,
    Version,
    supported_variants,
    variant_from_token,
    variant_token,
    version_from_token,
    version_token,
)

SALT = b"somesaltsomesalt"


class TestDeriveKey:
    """Test cases for kdf.derive_key."""

    def test_output_length(self):
        key = kdf.derive_key("foo", SALT, 1, 1024, 1, 24, Variant.ARGON2ID)

        assert len(key) == 24

    def test_deterministic(self):
        first = kdf.derive_key("foo", SALT, 1, 1024, 1, 32, Variant.ARGON2ID)
        second = kdf.derive_key("foo", SALT, 1, 1024, 1, 32, Variant.ARGON2ID)

        assert first == second

    def test_matches_argon2id(self):
        expected = hash_secret_raw(
            secret=b"foo", salt=SALT, time_cost=2, memory_cost=1024,
            parallelism=2, hash_len=32, type=Type.ID,
        )

        assert kdf.derive_key("foo", SALT, 2, 1024, 2, 32, Variant.ARGON2ID) == expected

    def test_matches_argon2i(self):
        expected = hash_secret_raw(
            secret=b"foo", salt=SALT, time_cost=2, memory_cost=1024,
            parallelism=2, hash_len=32, type=Type.I,
        )

        assert kdf.derive_key("foo", SALT, 2, 1024, 2, 32, Variant.ARGON2I) == expected

    def test_plain_string_variant(self):
        by_tag = kdf.derive_key("foo", SALT, 1, 1024, 1, 32, "argon2id")
        by_enum = kdf.derive_key("foo", SALT, 1, 1024, 1, 32, Variant.ARGON2ID)

        assert by_tag == by_enum

    def test_unknown_variant_falls_back_to_argon2i(self):
        fallback = kdf.derive_key("foo", SALT, 1, 1024, 1, 32, None)
        argon2i = kdf.derive_key("foo", SALT, 1, 1024, 1, 32, Variant.ARGON2I)

        assert fallback == argon2i

    def test_different_passwords(self):
        first = kdf.derive_key("foo", SALT, 1, 1024, 1, 32, Variant.ARGON2ID)
        second = kdf.derive_key("bar", SALT, 1, 1024, 1, 32, Variant.ARGON2ID)

        assert first != second

    def test_short_salt_rejected(self):
        with pytest.raises(HashingError):
            kdf.derive_key("foo", b"short", 1, 1024, 1, 32, Variant.ARGON2ID)


class TestGenerateSalt:
    """Test cases for kdf.generate_salt."""

    def test_length(self):
        assert len(kdf.generate_salt(16)) == 16
        assert len(kdf.generate_salt(32)) == 32

    def test_randomness(self):
        assert kdf.generate_salt(16) != kdf.generate_salt(16)


class TestModes:
    """Test cases for variant and version conversion."""

    def test_variant_tokens(self):
        assert variant_from_token("argon2i") is Variant.ARGON2I
        assert variant_from_token("argon2id") is Variant.ARGON2ID
        assert variant_token(Variant.ARGON2ID) == "argon2id"
        assert variant_token("custom") == "custom"
        assert str(Variant.ARGON2I) == "argon2i"

    @pytest.mark.parametrize("token", ["", "argon2", "argon2d", "ARGON2ID", "unknown"])
    def test_unknown_variant_token(self, token):
        with pytest.raises(InvalidModeError) as exc_info:
            variant_from_token(token)
        assert exc_info.value.details == {"variant": token}

    def test_version_tokens(self):
        assert Version.V13 == 0x13
        assert version_token(Version.V13) == 13
        assert version_from_token(13) is Version.V13

    @pytest.mark.parametrize("token", [0, 10, 16, 19])
    def test_unknown_version_token(self, token):
        with pytest.raises(InvalidVersionError):
            version_from_token(token)

    def test_supported_variants(self):
        assert supported_variants() == ["argon2i", "argon2id"]
