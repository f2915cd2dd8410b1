"""
Unit tests for the Base64/hex codec and the text helpers.
"""

import pytest

from unicrypt.crypto_engine.codec import (
    decode_base64, decode_hex, encode_base64, encode_hex, to_bytes, to_text,
)
from unicrypt.crypto_engine.errors import DecodeError


class TestBase64:

    def test_round_trip(self):
        data = bytes(range(256))
        assert decode_base64(encode_base64(data)) == data

    def test_known_value(self):
        assert encode_base64(b"hello") == "aGVsbG8="

    def test_empty(self):
        assert encode_base64(b"") == ""
        assert decode_base64("") == b""

    def test_accepts_bytes(self):
        assert decode_base64(b"aGVsbG8=") == b"hello"

    @pytest.mark.parametrize("bad", ["aGVsbG8", "aGV$bG8=", "a", "aGVsbG8==="])
    def test_malformed_input_rejected(self, bad):
        """Wrong alphabet or padding must not decode silently."""
        with pytest.raises(DecodeError):
            decode_base64(bad)

    def test_non_ascii_rejected(self):
        with pytest.raises(DecodeError):
            decode_base64("aGVsbG8é")


class TestHex:

    def test_lowercase_no_separators(self):
        assert encode_hex(b"\x00\xab\xff") == "00abff"

    def test_decode(self):
        assert decode_hex("00abff") == b"\x00\xab\xff"

    def test_malformed(self):
        with pytest.raises(DecodeError):
            decode_hex("zz")


class TestText:

    def test_to_bytes_utf8(self):
        assert to_bytes("é") == b"\xc3\xa9"

    def test_to_bytes_passthrough(self):
        assert to_bytes(b"\xff") == b"\xff"

    def test_to_text_invalid_utf8(self):
        with pytest.raises(DecodeError):
            to_text(b"\xff\xfe")
