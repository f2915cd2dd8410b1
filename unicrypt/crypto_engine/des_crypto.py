"""
DES and Triple DES (DESede) — CBC mode, PKCS#5, fixed all-zero IV.

Both are legacy and kept for wire compatibility with existing peers.
The zero IV makes encryption deterministic: equal plaintexts under
one key give equal ciphertexts.  Randomising the IV would change the
envelope format, so it stays fixed.
Block size: 64 bits (8 bytes).
"""

import logging

from Crypto.Cipher import DES
from Crypto.Util.Padding import pad, unpad
from cryptography.hazmat.primitives.ciphers import Cipher, modes
from cryptography.hazmat.decrepit.ciphers import algorithms
from cryptography.hazmat.primitives import padding as sym_padding

from ..config import Settings
from .descriptors import Algorithm
from .symmetric_base import SymmetricCipher, primitive_errors

logger = logging.getLogger("UniCrypt.DES")


class DESCipher(SymmetricCipher):
    """
    Single DES-CBC.

    Output format:  [ciphertext padded]

    Key: the first 8 bytes of the supplied key feed the DES key
    schedule; shorter keys are rejected by the primitive.
    """
    ALGORITHM  = Algorithm.DES_CBC
    DES_KEY    = 8
    BLOCK_SIZE = 8

    def __init__(self, key: bytes):
        super().__init__(key)
        if len(key) > self.DES_KEY:
            logger.debug(
                "DES uses the first %d of %d key bytes",
                self.DES_KEY, len(key),
            )

    def _new(self):
        return DES.new(
            self._key[:self.DES_KEY], DES.MODE_CBC, iv=Settings.LEGACY_IV
        )

    def encrypt(self, plaintext: bytes) -> bytes:
        with primitive_errors(self.cipher_name, "encrypt"):
            return self._new().encrypt(pad(plaintext, self.BLOCK_SIZE))

    def decrypt(self, data: bytes) -> bytes:
        with primitive_errors(self.cipher_name, "decrypt"):
            padded = self._new().decrypt(data)
            return unpad(padded, self.BLOCK_SIZE)


class TripleDESCipher(SymmetricCipher):
    """
    3DES-CBC.

    Output format:  [ciphertext padded]

    Key: exactly 24 bytes (three 8-byte DES keys), checked before the
    cipher is built.
    IV:  8 zero bytes.
    """
    ALGORITHM  = Algorithm.TRIPLE_DES_CBC
    BLOCK_BITS = 64      # DES block = 64 bits

    def encrypt(self, plaintext: bytes) -> bytes:
        with primitive_errors(self.cipher_name, "encrypt"):
            padder = sym_padding.PKCS7(self.BLOCK_BITS).padder()
            padded = padder.update(plaintext) + padder.finalize()
            enc    = Cipher(
                algorithms.TripleDES(self._key), modes.CBC(Settings.LEGACY_IV)
            ).encryptor()
            return enc.update(padded) + enc.finalize()

    def decrypt(self, data: bytes) -> bytes:
        with primitive_errors(self.cipher_name, "decrypt"):
            dec    = Cipher(
                algorithms.TripleDES(self._key), modes.CBC(Settings.LEGACY_IV)
            ).decryptor()
            padded = dec.update(data) + dec.finalize()
            unpadder = sym_padding.PKCS7(self.BLOCK_BITS).unpadder()
            return unpadder.update(padded) + unpadder.finalize()
