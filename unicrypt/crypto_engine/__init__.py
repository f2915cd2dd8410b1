"""
UniCrypt Crypto Engine — symmetric, asymmetric and hash primitives
behind one text-in / text-out contract.
"""

from .backend import ensure_initialized
from .errors import (
    CryptoError, KeyLengthError, KeyFormatError, DecodeError,
    PlaintextTooLargeError, IntegrityError, CipherOperationError,
    UnsupportedAlgorithmError,
)
from .descriptors   import Algorithm, AlgorithmDescriptor, Mode, Padding, IVPolicy
from .key_validator import KeyValidator
from .hash_crypto   import HashCrypto
from .rsa_crypto    import RSACrypto

# ── Unified symmetric cipher system ─────────────────────────────
from .symmetric_base import SymmetricCipher
from .aes_crypto     import AESECBCipher, AESGCMCipher
from .des_crypto     import DESCipher, TripleDESCipher
from .rc5_crypto     import RC5Cipher
from .idea_crypto    import IDEACBCCipher
from .rc4_crypto     import RC4Cipher
from .cipher_factory import CipherFactory, SymmetricCipherSuite

__all__ = [
    "ensure_initialized",
    # Errors
    "CryptoError", "KeyLengthError", "KeyFormatError", "DecodeError",
    "PlaintextTooLargeError", "IntegrityError", "CipherOperationError",
    "UnsupportedAlgorithmError",
    # Descriptors
    "Algorithm", "AlgorithmDescriptor", "Mode", "Padding", "IVPolicy",
    "KeyValidator", "HashCrypto", "RSACrypto",
    # Unified interface
    "SymmetricCipher", "CipherFactory", "SymmetricCipherSuite",
    # Individual ciphers
    "AESECBCipher", "AESGCMCipher", "DESCipher", "TripleDESCipher",
    "RC5Cipher", "IDEACBCCipher", "RC4Cipher",
]
