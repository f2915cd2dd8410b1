"""
AES symmetric encryption — legacy ECB and authenticated GCM.

AES-128-ECB keeps the PKCS#5 padded, IV-less layout older systems
expect.  AES-256-GCM is the recommended mode: a fresh 12-byte nonce per
call, prepended to ciphertext‖tag.
"""

import logging

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives import padding as sym_padding

from ..config import Settings
from ..utils.random_gen import SecureRandom
from .descriptors import Algorithm
from .errors import IntegrityError
from .symmetric_base import SymmetricCipher, primitive_errors

logger = logging.getLogger("UniCrypt.AES")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  AES-ECB + PKCS#5 — legacy, no IV
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class AESECBCipher(SymmetricCipher):
    """
    AES in Electronic Codebook mode.

    Output format:  [ciphertext padded]

    The key is whatever the caller supplies; AES itself accepts
    16, 24 or 32 bytes.
    """
    ALGORITHM  = Algorithm.AES_ECB
    BLOCK_BITS = 128

    def encrypt(self, plaintext: bytes) -> bytes:
        with primitive_errors(self.cipher_name, "encrypt"):
            padder = sym_padding.PKCS7(self.BLOCK_BITS).padder()
            padded = padder.update(plaintext) + padder.finalize()
            enc    = Cipher(algorithms.AES(self._key), modes.ECB()).encryptor()
            return enc.update(padded) + enc.finalize()

    def decrypt(self, data: bytes) -> bytes:
        with primitive_errors(self.cipher_name, "decrypt"):
            dec    = Cipher(algorithms.AES(self._key), modes.ECB()).decryptor()
            padded = dec.update(data) + dec.finalize()
            unpad  = sym_padding.PKCS7(self.BLOCK_BITS).unpadder()
            return unpad.update(padded) + unpad.finalize()


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  AES-256-GCM (AEAD)
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class AESGCMCipher(SymmetricCipher):
    """
    AES-256 in Galois/Counter Mode (authenticated encryption).

    Output format:  [nonce 12B][ciphertext][GCM tag 16B]

    A nonce cannot be passed in; every encrypt() draws a new one.
    """
    ALGORITHM  = Algorithm.AES_GCM
    NONCE_SIZE = Settings.GCM_NONCE_SIZE
    TAG_SIZE   = Settings.GCM_TAG_SIZE

    def __init__(self, key: bytes):
        super().__init__(key)
        self._aesgcm = AESGCM(key)

    def encrypt(self, plaintext: bytes) -> bytes:
        nonce = SecureRandom.generate_nonce(self.NONCE_SIZE)
        ct    = self._aesgcm.encrypt(nonce, plaintext, None)
        return nonce + ct                       # nonce ‖ ct ‖ tag

    def decrypt(self, data: bytes) -> bytes:
        if len(data) < self.NONCE_SIZE + self.TAG_SIZE:
            raise IntegrityError(
                "AES-256-GCM envelope is too short to carry nonce and tag"
            )
        nonce = data[:self.NONCE_SIZE]
        ct    = data[self.NONCE_SIZE:]
        try:
            return self._aesgcm.decrypt(nonce, ct, None)
        except InvalidTag:
            logger.warning("AES-256-GCM authentication failed")
            raise IntegrityError(
                "AES-256-GCM tag mismatch — data may be tampered"
            )
