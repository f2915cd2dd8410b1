"""
Unit tests for the RC5-64 block function, key expansion and RC5Cipher.
"""

import os

import pytest

from unicrypt import rc5_decrypt, rc5_encrypt
from unicrypt.crypto_engine.codec import decode_base64, encode_base64
from unicrypt.crypto_engine.errors import CipherOperationError
from unicrypt.crypto_engine.rc5_crypto import (
    P64, Q64, RC5Cipher, decrypt_block, encrypt_block, expand_key,
)


class TestKeyExpansion:

    def test_table_size(self):
        assert len(expand_key(b"key", 12)) == 2 * (12 + 1)

    def test_zero_rounds_table(self):
        assert len(expand_key(b"key", 0)) == 2

    def test_key_changes_table(self):
        assert expand_key(b"key-a", 12) != expand_key(b"key-b", 12)

    def test_words_fit_64_bits(self):
        assert all(0 <= w < 2 ** 64 for w in expand_key(os.urandom(40), 20))

    def test_magic_constants(self):
        assert P64 == 0xB7E151628AED2A6B
        assert Q64 == 0x9E3779B97F4A7C15


class TestBlockFunction:

    @pytest.mark.parametrize("rounds", [0, 1, 12, 16, 255])
    def test_decrypt_inverts_encrypt(self, rounds):
        S = expand_key(b"block-test-key", rounds)
        for _ in range(8):
            block = os.urandom(16)
            assert decrypt_block(encrypt_block(block, S, rounds), S, rounds) == block

    def test_rc5_64_24_24_vector(self):
        """RC5-64/24/24 published test vector (little-endian words)."""
        key = bytes(range(24))
        S = expand_key(key, 24)
        ct = encrypt_block(bytes(range(16)), S, 24)
        assert ct.hex() == "a46772820edbce0235abea32ae7178da"
        assert decrypt_block(ct, S, 24) == bytes(range(16))

    def test_block_changes(self):
        S = expand_key(b"k", 12)
        assert encrypt_block(bytes(16), S, 12) != bytes(16)


class TestRC5Cipher:

    @pytest.mark.parametrize("text", ["a", "hello", "exactly 16 bytes", "x" * 33, "多语言"])
    def test_round_trip(self, text):
        ct = rc5_encrypt(text, "rc5-key", 12)
        assert rc5_decrypt(ct, "rc5-key", 12) == text

    def test_default_rounds(self):
        assert rc5_decrypt(rc5_encrypt("hello", "k"), "k") == "hello"

    def test_zero_padded_to_block(self):
        assert len(decode_base64(rc5_encrypt("hello", "k", 12))) == 16
        assert len(decode_base64(rc5_encrypt("exactly 16 bytes", "k", 12))) == 16
        assert len(decode_base64(rc5_encrypt("x" * 17, "k", 12))) == 32

    def test_empty_plaintext(self):
        assert rc5_encrypt("", "k", 12) == ""
        assert rc5_decrypt("", "k", 12) == ""

    def test_trailing_zero_bytes_are_lost(self):
        """Zero padding cannot tell pad bytes from plaintext zeros."""
        cipher = RC5Cipher(b"rc5-key", rounds=12)
        assert cipher.decrypt(cipher.encrypt(b"abc\x00\x00")) == b"abc"

    def test_deterministic(self):
        assert rc5_encrypt("same", "k", 12) == rc5_encrypt("same", "k", 12)

    def test_rounds_change_ciphertext(self):
        assert rc5_encrypt("hello", "k", 12) != rc5_encrypt("hello", "k", 16)

    def test_key_changes_ciphertext(self):
        assert rc5_encrypt("hello", "k1", 12) != rc5_encrypt("hello", "k2", 12)

    @pytest.mark.parametrize("rounds", [-1, 256, 1000])
    def test_unsupported_rounds(self, rounds):
        with pytest.raises(CipherOperationError):
            rc5_encrypt("hello", "k", rounds)

    def test_non_integer_rounds(self):
        with pytest.raises(CipherOperationError):
            RC5Cipher(b"k", rounds="12")

    def test_oversized_key(self):
        with pytest.raises(CipherOperationError):
            rc5_encrypt("hello", "k" * 256, 12)

    def test_ragged_ciphertext(self):
        with pytest.raises(CipherOperationError):
            rc5_decrypt(encode_base64(bytes(15)), "k", 12)

    def test_info_reports_rounds(self):
        assert RC5Cipher(b"k", rounds=20).info()["rounds"] == 20
