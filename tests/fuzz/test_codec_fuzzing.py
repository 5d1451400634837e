"""
Fuzz Tests for the argonhash codec

Property tests with hypothesis: arbitrary parameter sets survive
encoding, and arbitrary input never escapes the documented error types.
"""

import base64
import sys
from pathlib import Path

import hypothesis.strategies as st
import pytest
from hypothesis import given, settings, Verbosity

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'python-core'))

from argonhash import codec
from argonhash.config import ArgonConfig
from argonhash.errors import ArgonError, Base64DecodeError, FormatMismatchError
from argonhash.modes import Variant


# Hypothesis strategies for fuzz testing
binary_data = st.binary(min_size=0, max_size=128)
uint32 = st.integers(min_value=0, max_value=0xFFFFFFFF)
uint8 = st.integers(min_value=0, max_value=0xFF)
variants = st.sampled_from(list(Variant))
b64_text = st.text(
    alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/",
    max_size=64,
)


class TestCodecFuzzing:
    """Fuzz tests for hash string encoding and decoding."""

    @given(variant=variants, memory=uint32, time=uint32, parallelism=uint8,
           salt=binary_data, key=binary_data)
    @settings(verbosity=Verbosity.quiet, max_examples=200)
    def test_round_trip(self, variant, memory, time, parallelism, salt, key):
        """Decoding an encoded config gives back every field."""
        config = ArgonConfig(
            time_cost=time, memory_cost=memory, parallelism=parallelism,
            variant=variant, salt=salt, key=key,
        )

        decoded = ArgonConfig.from_hash(config.encode())

        assert decoded.variant is variant
        assert decoded.version == 13
        assert decoded.memory_cost == memory
        assert decoded.time_cost == time
        assert decoded.parallelism == parallelism
        assert decoded.salt == salt
        assert decoded.key == key
        assert decoded.salt_length == len(salt)
        assert decoded.key_length == len(key)

    @given(data=binary_data)
    @settings(verbosity=Verbosity.quiet, max_examples=200)
    def test_base64_round_trip(self, data):
        encoded = codec.b64encode_raw(data)

        assert "=" not in encoded
        assert codec.b64decode_strict(encoded) == data

    @given(text=b64_text)
    @settings(verbosity=Verbosity.quiet, max_examples=300)
    def test_strict_decode_accepts_only_canonical(self, text):
        """Accepted input is exactly the canonical encoding of its bytes."""
        try:
            data = codec.b64decode_strict(text)
        except Base64DecodeError as e:
            assert 0 <= e.offset < len(text)
            return
        assert base64.b64encode(data).decode("ascii").rstrip("=") == text

    @given(text=st.text(max_size=128))
    @settings(verbosity=Verbosity.quiet, max_examples=300)
    def test_decode_arbitrary_text(self, text):
        """Garbage input only raises the documented exceptions."""
        try:
            codec.decode(text)
        except (ArgonError, FormatMismatchError, Base64DecodeError):
            pass

    @given(segments=st.lists(st.text(alphabet="$argon2idv=13mtp,0123456789AQ", max_size=12),
                             min_size=0, max_size=8))
    @settings(verbosity=Verbosity.quiet, max_examples=300)
    def test_decode_near_miss(self, segments):
        """Strings close to the real layout only raise the documented exceptions."""
        try:
            codec.decode("$".join(segments))
        except (ArgonError, FormatMismatchError, Base64DecodeError):
            pass

    @pytest.mark.parametrize("bad", ["١٣", "１３"])
    def test_non_ascii_digits_rejected(self, bad):
        with pytest.raises(FormatMismatchError):
            codec.decode(f"$argon2id$v={bad}$m=1,t=1,p=1$c2FsdHNhbHQ$a2V5")
