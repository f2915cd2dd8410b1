"""
Unit tests for HashCrypto: SM3, HMAC-SM3 (plain and salted), MD5, SHA-256.
"""

import pytest

from unicrypt import hmac_sm3, hmac_sm3_with_salt, md5, sha256, sm3
from unicrypt.crypto_engine import backend
from unicrypt.crypto_engine.hash_crypto import HashCrypto

requires_sm3 = pytest.mark.skipif(
    not (backend.is_supported("SM3") and backend.is_supported("HMAC-SM3")),
    reason="linked OpenSSL has no SM3",
)


@requires_sm3
class TestSM3:

    def test_empty_string(self):
        expected = "1ab21d8355cfa17f8e61194831e81a8f22bec8c728fefb747ed035eb5082aa2b"
        assert sm3("") == expected

    def test_abc(self):
        expected = "66c7f0f462eeedd9d1f2d46bdc10e4e24167c4875cf2f7a2297da02b8f4ba8e0"
        assert sm3("abc") == expected

    def test_digest_is_32_bytes(self):
        assert len(HashCrypto.sm3_digest(b"x")) == 32

    def test_utf8_input(self):
        assert sm3("国密") == HashCrypto.sm3_digest("国密".encode("utf-8")).hex()


@requires_sm3
class TestHmacSM3:

    def test_hex_length(self):
        assert len(hmac_sm3("k", "data")) == 64

    def test_deterministic(self):
        assert hmac_sm3("k", "data") == hmac_sm3("k", "data")

    def test_key_matters(self):
        assert hmac_sm3("k1", "data") != hmac_sm3("k2", "data")

    def test_not_plain_digest(self):
        assert hmac_sm3("", "data") != sm3("data")

    def test_salt_is_appended_to_text(self):
        salt = "盐-salt".encode("utf-8")
        expected = hmac_sm3("k", "data" + salt.decode("utf-8"))
        assert hmac_sm3_with_salt("k", "data", salt) == expected

    def test_empty_salt(self):
        assert hmac_sm3_with_salt("k", "data", b"") == hmac_sm3("k", "data")

    def test_invalid_utf8_salt_is_replaced(self):
        """Undecodable salt bytes collapse to U+FFFD before hashing."""
        assert hmac_sm3_with_salt("k", "data", b"\xff") == hmac_sm3("k", "data\ufffd")
        assert (hmac_sm3_with_salt("k", "data", b"\xff")
                == hmac_sm3_with_salt("k", "data", b"\xfe"))

    def test_verify(self):
        mac = hmac_sm3("k", "data")
        assert HashCrypto.verify_hmac_sm3("k", "data", mac)
        assert not HashCrypto.verify_hmac_sm3("k", "other", mac)
        assert not HashCrypto.verify_hmac_sm3("k", "data", "not-hex")


class TestLegacyDigests:

    def test_md5_empty(self):
        assert md5("") == "d41d8cd98f00b204e9800998ecf8427e"

    def test_md5_abc(self):
        assert md5("abc") == "900150983cd24fb0d6963f7d28e17f72"

    def test_sha256_empty(self):
        expected = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        assert sha256("") == expected

    def test_sha256_abc(self):
        expected = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        assert sha256("abc") == expected
