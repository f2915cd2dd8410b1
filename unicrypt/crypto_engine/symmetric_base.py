"""
Abstract base class for all symmetric ciphers in UniCrypt.

Every cipher (AES-ECB, AES-GCM, DES, 3DES, RC5, IDEA, RC4) implements
this interface so the suite can treat them uniformly.  A cipher
instance is built for a single call: the key is validated against the
algorithm's descriptor in ``__init__`` before any primitive exists.

encrypt() returns the raw envelope:
    AEAD ciphers   → nonce + ciphertext + tag
    other ciphers  → ciphertext (padding included)

decrypt() accepts that envelope and returns plaintext.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager

from cryptography.exceptions import UnsupportedAlgorithm

from .descriptors import Algorithm, AlgorithmDescriptor
from .errors import CipherOperationError, UnsupportedAlgorithmError
from .key_validator import KeyValidator


@contextmanager
def primitive_errors(cipher_name: str, operation: str):
    """Translate library exceptions into the UniCrypt hierarchy."""
    try:
        yield
    except UnsupportedAlgorithm as exc:
        raise UnsupportedAlgorithmError(
            f"{cipher_name} is not supported by the crypto backend"
        ) from exc
    except (ValueError, TypeError) as exc:
        raise CipherOperationError(
            f"{cipher_name} {operation} failed: {exc}"
        ) from exc


class SymmetricCipher(ABC):
    """Unified interface for symmetric encryption."""

    ALGORITHM: Algorithm

    def __init__(self, key: bytes):
        KeyValidator.validate(self.descriptor, key)
        self._key = key

    @abstractmethod
    def encrypt(self, plaintext: bytes) -> bytes:
        """Encrypt plaintext → envelope bytes."""

    @abstractmethod
    def decrypt(self, data: bytes) -> bytes:
        """Decrypt an envelope produced by encrypt() → plaintext."""

    @property
    def descriptor(self) -> AlgorithmDescriptor:
        return self.ALGORITHM.descriptor

    @property
    def cipher_name(self) -> str:
        return self.descriptor.name

    @property
    def key_size(self) -> int:
        """Key size in bytes as supplied by the caller."""
        return len(self._key)

    @property
    def key_size_bits(self) -> int:
        return self.key_size * 8

    @property
    def iv_size(self) -> int:
        return self.descriptor.iv_length

    @property
    def is_aead(self) -> bool:
        return self.descriptor.authenticated

    def info(self) -> dict:
        """Return cipher metadata, including the caller's key size."""
        base = self.descriptor.info()
        base["key_bits"] = self.key_size_bits
        return base
