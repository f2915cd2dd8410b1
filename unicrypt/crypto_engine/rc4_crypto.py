"""
RC4 (ARC4) — legacy stream cipher.

Prohibited in TLS by RFC 7465; kept only so old ciphertexts can still
be read and produced.  No IV, no padding: ciphertext length equals
plaintext length, and the same key always yields the same keystream.

Key: at most 256 bytes; the primitive rejects other lengths.
"""

from Crypto.Cipher import ARC4

from .descriptors import Algorithm
from .symmetric_base import SymmetricCipher, primitive_errors


class RC4Cipher(SymmetricCipher):
    """
    RC4 stream cipher.

    Output format:  [ciphertext]
    """
    ALGORITHM = Algorithm.RC4

    def _apply(self, data: bytes, operation: str) -> bytes:
        with primitive_errors(self.cipher_name, operation):
            return ARC4.new(self._key).encrypt(data)

    def encrypt(self, plaintext: bytes) -> bytes:
        return self._apply(plaintext, "encrypt")

    def decrypt(self, data: bytes) -> bytes:
        return self._apply(data, "decrypt")
