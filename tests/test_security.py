"""
Security tests for SHAVault.

Tests specifically for security-related scenarios:
- Invalid inputs
- Sensitivity to single-bit changes
- Constant tables cannot be tampered with
"""

import pytest

from shavault.core_crypto.sha256 import sha256, sha256_hex, H_INITIAL, K


class TestInvalidInputs:
    """Non bytes-like input is rejected at the boundary."""

    def test_str_rejected(self):
        """Text must be encoded first."""
        with pytest.raises(TypeError, match="encoded"):
            sha256("abc")

    @pytest.mark.parametrize("value", [None, 42, 3.5, [1, 2, 3], {"a": 1}])
    def test_non_bytes_rejected(self, value):
        """Other objects are not bytes-like."""
        with pytest.raises(TypeError, match="not bytes-like"):
            sha256(value)

    def test_hex_helper_rejects_str(self):
        """sha256_hex shares the same boundary check."""
        with pytest.raises(TypeError):
            sha256_hex("abc")


class TestAvalanche:
    """Flipping one input bit changes the digest."""

    @pytest.mark.parametrize("bit", [0, 1, 7, 8, 15, 23])
    def test_single_bit_flip_abc(self, bit):
        """Each flipped bit of 'abc' gives a different digest."""
        data = bytearray(b"abc")
        data[bit // 8] ^= 1 << (bit % 8)
        assert sha256(bytes(data)) != sha256(b"abc")

    def test_flip_in_second_block(self):
        """A flip deep in a multi-block message still changes the digest."""
        original = bytes(200)
        flipped = bytearray(original)
        flipped[150] ^= 0x01
        assert sha256(bytes(flipped)) != sha256(original)

    def test_roughly_half_the_bits_change(self):
        """Smoke test: a one-bit flip changes many output bits."""
        a = int.from_bytes(sha256(b"avalanche"), "big")
        b = int.from_bytes(sha256(b"avalanchf"), "big")
        assert bin(a ^ b).count("1") > 64

    def test_trailing_zero_byte_matters(self):
        """Length is bound into the digest: b'' and b'\\x00' differ."""
        assert sha256(b"") != sha256(b"\x00")
        assert sha256(b"a") != sha256(b"a\x00")


class TestConstantTables:
    """Round constants and initial hash values are never mutated."""

    def test_tables_are_immutable(self):
        """Tables are tuples; item assignment fails."""
        with pytest.raises(TypeError):
            K[0] = 0
        with pytest.raises(TypeError):
            H_INITIAL[0] = 0

    def test_tables_unchanged_after_calls(self):
        """Hashing does not touch the shared tables."""
        k_before = tuple(K)
        h_before = tuple(H_INITIAL)
        for length in (0, 55, 56, 64, 1000):
            sha256(b"\xaa" * length)
        assert K == k_before
        assert H_INITIAL == h_before

    def test_independent_calls_do_not_share_state(self):
        """A call in between does not affect the next result."""
        first = sha256(b"abc")
        sha256(b"something else entirely" * 10)
        assert sha256(b"abc") == first
