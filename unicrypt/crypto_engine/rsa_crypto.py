"""
RSA asymmetric encryption and DER key serialisation.

Single-block PKCS#1 v1.5 only: a plaintext larger than
``key_size_bytes - 11`` is rejected, never chunked.  Keys travel as
Base64 text wrapping DER (X.509 SubjectPublicKeyInfo for public keys,
unencrypted PKCS#8 for private keys).

Decryption goes through pycryptodome's PKCS1_v1_5 with a random
sentinel.  OpenSSL's implicit rejection would hand back synthetic
plaintext for a bad block; a padding failure must raise instead.
"""

import logging

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import rsa, padding as asym_padding
from cryptography.hazmat.primitives import serialization
from Crypto.Cipher import PKCS1_v1_5
from Crypto.IO import PKCS8
from Crypto.PublicKey import RSA

from ..config import Settings
from ..utils import SecureRandom
from .codec import decode_base64, encode_base64, to_bytes, to_text
from .errors import (
    CipherOperationError, DecodeError, KeyFormatError, PlaintextTooLargeError,
)

logger = logging.getLogger("UniCrypt.RSA")


class RSACrypto:
    """RSA PKCS#1 v1.5 encryption + DER/Base64 key import and export."""

    def __init__(self, key_size: int = Settings.RSA_KEY_SIZE):
        self.key_size = key_size

    # ── key generation ───────────────────────────────────────────
    def generate_keys(self) -> tuple[rsa.RSAPublicKey, rsa.RSAPrivateKey]:
        """Return *(public_key, private_key)*."""
        private_key = rsa.generate_private_key(
            public_exponent=Settings.RSA_PUBLIC_EXPONENT,
            key_size=self.key_size,
        )
        logger.debug("Generated %d-bit RSA key pair", self.key_size)
        return private_key.public_key(), private_key

    # ── encrypt / decrypt ────────────────────────────────────────
    @staticmethod
    def max_plaintext_size(key) -> int:
        return key.key_size // 8 - Settings.RSA_PKCS1_OVERHEAD

    def encrypt_bytes(self, plaintext: bytes,
                      public_key: rsa.RSAPublicKey) -> bytes:
        limit = self.max_plaintext_size(public_key)
        if len(plaintext) > limit:
            raise PlaintextTooLargeError(limit, len(plaintext))
        return public_key.encrypt(plaintext, asym_padding.PKCS1v15())

    def decrypt_bytes(self, ciphertext: bytes,
                      private_key: rsa.RSAPrivateKey) -> bytes:
        der = private_key.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
        sentinel = SecureRandom.generate_bytes(Settings.RSA_SENTINEL_SIZE)
        try:
            cipher    = PKCS1_v1_5.new(RSA.import_key(der))
            plaintext = cipher.decrypt(ciphertext, sentinel)
        except (ValueError, TypeError) as exc:
            raise CipherOperationError(f"RSA decrypt failed: {exc}") from exc
        if plaintext == sentinel:
            logger.warning("RSA decrypt rejected: PKCS#1 v1.5 padding invalid")
            raise CipherOperationError("RSA decrypt failed: invalid padding")
        return plaintext

    def encrypt(self, plaintext: str | bytes,
                public_key: rsa.RSAPublicKey) -> str:
        return encode_base64(self.encrypt_bytes(to_bytes(plaintext), public_key))

    def decrypt(self, envelope: str | bytes,
                private_key: rsa.RSAPrivateKey) -> str:
        return to_text(self.decrypt_bytes(decode_base64(envelope), private_key))

    # ── serialisation ────────────────────────────────────────────
    @staticmethod
    def export_public_key(public_key: rsa.RSAPublicKey) -> str:
        return encode_base64(public_key.public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        ))

    @staticmethod
    def export_private_key(private_key: rsa.RSAPrivateKey) -> str:
        return encode_base64(private_key.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        ))

    @staticmethod
    def _der(b64_der: str | bytes) -> bytes:
        try:
            return decode_base64(b64_der)
        except DecodeError as exc:
            raise KeyFormatError(f"key is not valid Base64: {exc}") from exc

    @classmethod
    def import_public_key(cls, b64_der: str | bytes) -> rsa.RSAPublicKey:
        try:
            key = serialization.load_der_public_key(cls._der(b64_der))
        except (ValueError, UnsupportedAlgorithm) as exc:
            raise KeyFormatError(f"malformed X.509 public key: {exc}") from exc
        if not isinstance(key, rsa.RSAPublicKey):
            raise KeyFormatError(
                f"expected an RSA public key, got {type(key).__name__}"
            )
        return key

    @classmethod
    def import_private_key(cls, b64_der: str | bytes) -> rsa.RSAPrivateKey:
        der = cls._der(b64_der)
        try:
            # load_der_private_key also takes traditional PKCS#1 DER
            PKCS8.unwrap(der)
            key = serialization.load_der_private_key(der, password=None)
        except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
            raise KeyFormatError(f"malformed PKCS#8 private key: {exc}") from exc
        if not isinstance(key, rsa.RSAPrivateKey):
            raise KeyFormatError(
                f"expected an RSA private key, got {type(key).__name__}"
            )
        return key
