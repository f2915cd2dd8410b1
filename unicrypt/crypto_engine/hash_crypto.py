"""
Hashing and HMAC utilities — SM3, HMAC-SM3, MD5, SHA-256.

Text inputs are UTF-8 encoded; results are lowercase hex.
MD5 and SHA-256 exist for interop with legacy systems only.
"""

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, hmac

from ..config import Settings
from . import backend
from .codec import decode_hex, encode_hex, to_bytes
from .errors import DecodeError


class HashCrypto:
    """Static helpers for unkeyed digests and HMAC-SM3."""

    # ── raw digests ──────────────────────────────────────────────
    @staticmethod
    def _digest(algorithm: hashes.HashAlgorithm, data: bytes) -> bytes:
        d = hashes.Hash(algorithm)
        d.update(data)
        return d.finalize()

    @staticmethod
    def sm3_digest(data: bytes) -> bytes:
        backend.require("SM3")
        return HashCrypto._digest(hashes.SM3(), data)

    @staticmethod
    def hmac_sm3_digest(key: bytes, data: bytes) -> bytes:
        backend.require("HMAC-SM3")
        h = hmac.HMAC(key, hashes.SM3())
        h.update(data)
        return h.finalize()

    # ── text → hex ───────────────────────────────────────────────
    @staticmethod
    def sm3(text: str) -> str:
        return encode_hex(HashCrypto.sm3_digest(to_bytes(text)))

    @staticmethod
    def hmac_sm3(key: str, text: str) -> str:
        return encode_hex(
            HashCrypto.hmac_sm3_digest(to_bytes(key), to_bytes(text))
        )

    @staticmethod
    def hmac_sm3_with_salt(key: str, text: str, salt: bytes) -> str:
        """
        HMAC-SM3 over ``text`` with ``salt`` appended to it.

        The joined bytes are turned back into a string before hashing,
        and invalid UTF-8 in the salt becomes U+FFFD.  A salt that is
        not valid UTF-8 therefore does not reach the MAC verbatim.
        """
        combined = to_bytes(text) + salt
        salted_text = combined.decode(Settings.TEXT_ENCODING, errors="replace")
        return HashCrypto.hmac_sm3(key, salted_text)

    @staticmethod
    def verify_hmac_sm3(key: str, text: str, expected_hex: str) -> bool:
        backend.require("HMAC-SM3")
        try:
            expected = decode_hex(expected_hex)
        except DecodeError:
            return False
        h = hmac.HMAC(to_bytes(key), hashes.SM3())
        h.update(to_bytes(text))
        try:
            h.verify(expected)
        except InvalidSignature:
            return False
        return True

    @staticmethod
    def md5(text: str) -> str:
        return encode_hex(HashCrypto._digest(hashes.MD5(), to_bytes(text)))

    @staticmethod
    def sha256(text: str) -> str:
        return encode_hex(HashCrypto._digest(hashes.SHA256(), to_bytes(text)))
