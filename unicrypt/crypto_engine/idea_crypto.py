"""
IDEA block cipher — CBC mode with PKCS#7.

Designed by Lai and Massey (1991); patents have expired but it sees
little use today.  Included for legacy compatibility.

Key:   128 bits.  Shorter keys are left-padded with zero bytes and
       longer keys truncated, the way common IDEA key schedules
       normalise input.
Block: 64 bits (8 bytes)
IV:    the all-zero block CBC implementations fall back to when none
       is supplied.

IDEA lives in OpenSSL's legacy provider; if the linked build omits it,
CipherFactory.create refuses the algorithm and a directly built cipher
raises UnsupportedAlgorithmError on first use.
"""

from cryptography.hazmat.primitives.ciphers import Cipher, modes
from cryptography.hazmat.decrepit.ciphers import algorithms
from cryptography.hazmat.primitives import padding as sym_padding

from ..config import Settings
from .descriptors import Algorithm
from .symmetric_base import SymmetricCipher, primitive_errors


class IDEACBCCipher(SymmetricCipher):
    """
    IDEA-CBC.

    Output format:  [ciphertext padded]
    """
    ALGORITHM  = Algorithm.IDEA_CBC
    IDEA_KEY   = 16
    BLOCK_BITS = 64

    def __init__(self, key: bytes):
        super().__init__(key)
        self._idea_key = key.rjust(self.IDEA_KEY, b"\x00")[:self.IDEA_KEY]

    def _cipher(self) -> Cipher:
        return Cipher(
            algorithms.IDEA(self._idea_key), modes.CBC(Settings.LEGACY_IV)
        )

    def encrypt(self, plaintext: bytes) -> bytes:
        with primitive_errors(self.cipher_name, "encrypt"):
            padder = sym_padding.PKCS7(self.BLOCK_BITS).padder()
            padded = padder.update(plaintext) + padder.finalize()
            enc    = self._cipher().encryptor()
            return enc.update(padded) + enc.finalize()

    def decrypt(self, data: bytes) -> bytes:
        with primitive_errors(self.cipher_name, "decrypt"):
            dec    = self._cipher().decryptor()
            padded = dec.update(data) + dec.finalize()
            unpad  = sym_padding.PKCS7(self.BLOCK_BITS).unpadder()
            return unpad.update(padded) + unpad.finalize()
