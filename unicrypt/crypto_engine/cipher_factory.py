"""
CipherFactory — cipher creation and discovery;
SymmetricCipherSuite — the single encrypt/decrypt entry point.

Usage:
    envelope  = SymmetricCipherSuite.encrypt("AES-256-GCM", "hello", key)
    plaintext = SymmetricCipherSuite.decrypt("AES-256-GCM", envelope, key)

    envelope  = SymmetricCipherSuite.encrypt(Algorithm.RC5, "hi", key,
                                             rounds=16)

    # List all available ciphers
    for name in CipherFactory.list_ciphers():
        print(CipherFactory.get_info(name))
"""

import logging

from . import backend
from .codec import decode_base64, encode_base64, to_bytes, to_text
from .descriptors import Algorithm
from .errors import CipherOperationError, UnsupportedAlgorithmError
from .symmetric_base import SymmetricCipher
from .aes_crypto  import AESECBCipher, AESGCMCipher
from .des_crypto  import DESCipher, TripleDESCipher
from .rc5_crypto  import RC5Cipher
from .idea_crypto import IDEACBCCipher
from .rc4_crypto  import RC4Cipher

logger = logging.getLogger("UniCrypt.CipherFactory")


class CipherFactory:
    """
    Create any supported cipher by name or ``Algorithm`` member.

    The factory handles:
    - Name resolution to the closed ``Algorithm`` set
    - Per-algorithm extra parameters (only RC5 takes ``rounds``)
    - Backend capability checks for primitives OpenSSL may lack
    """

    # ── Registry ─────────────────────────────────────────────────
    # Each entry: cipher class, accepted keyword params, backend need
    _REGISTRY: dict[Algorithm, dict] = {
        Algorithm.AES_ECB: {
            "class":    AESECBCipher,
            "params":   (),
            "requires": None,
        },
        Algorithm.AES_GCM: {
            "class":    AESGCMCipher,
            "params":   (),
            "requires": None,
        },
        Algorithm.DES_CBC: {
            "class":    DESCipher,
            "params":   (),
            "requires": None,
        },
        Algorithm.TRIPLE_DES_CBC: {
            "class":    TripleDESCipher,
            "params":   (),
            "requires": "3DES",
        },
        Algorithm.RC5: {
            "class":    RC5Cipher,
            "params":   ("rounds",),
            "requires": None,
        },
        Algorithm.IDEA_CBC: {
            "class":    IDEACBCCipher,
            "params":   (),
            "requires": "IDEA",
        },
        Algorithm.RC4: {
            "class":    RC4Cipher,
            "params":   (),
            "requires": None,
        },
    }

    # ── Factory method ───────────────────────────────────────────

    @classmethod
    def create(cls, algorithm: str | Algorithm, key: bytes,
               **params) -> SymmetricCipher:
        """
        Create a cipher instance for one call.

        Parameters
        ----------
        algorithm : str | Algorithm
            A registered name (e.g. "AES-256-GCM") or enum member.
        key : bytes
            Raw key bytes; validated against the algorithm's descriptor.
        **params
            Algorithm-specific options, e.g. ``rounds`` for RC5.

        Returns
        -------
        SymmetricCipher
            Ready-to-use cipher instance.
        """
        member = Algorithm.from_name(algorithm)
        entry  = cls._REGISTRY[member]

        unexpected = set(params) - set(entry["params"])
        if unexpected:
            raise CipherOperationError(
                f"{member.descriptor.name} does not accept parameter(s): "
                f"{', '.join(sorted(unexpected))}"
            )
        if entry["requires"]:
            backend.require(entry["requires"])

        cipher = entry["class"](key, **params)
        logger.debug(
            "Created cipher: %s (key=%d bits, aead=%s)",
            cipher.cipher_name, cipher.key_size_bits, cipher.is_aead,
        )
        return cipher

    # ── Discovery ────────────────────────────────────────────────

    @classmethod
    def list_ciphers(cls) -> list[str]:
        """Return names of every cipher the backend can run."""
        return [
            member.descriptor.name for member in cls._REGISTRY
            if cls.is_available(member)
        ]

    @classmethod
    def list_aead_ciphers(cls) -> list[str]:
        """Return only AEAD cipher names."""
        return [
            member.descriptor.name for member in cls._REGISTRY
            if member.descriptor.authenticated
        ]

    @classmethod
    def get_info(cls, algorithm: str | Algorithm) -> dict:
        """Return metadata for a cipher."""
        member = Algorithm.from_name(algorithm)
        info = member.descriptor.info()
        info["params"]    = list(cls._REGISTRY[member]["params"])
        info["available"] = cls.is_available(member)
        return info

    @classmethod
    def get_all_info(cls) -> list[dict]:
        return [cls.get_info(member) for member in cls._REGISTRY]

    @classmethod
    def is_available(cls, algorithm: str | Algorithm) -> bool:
        try:
            member = Algorithm.from_name(algorithm)
        except UnsupportedAlgorithmError:
            return False
        requires = cls._REGISTRY[member]["requires"]
        return requires is None or backend.is_supported(requires)

    @classmethod
    def get_required_key_size(cls, algorithm: str | Algorithm) -> int | None:
        """Return the enforced key size in bytes, or None if unchecked."""
        return Algorithm.from_name(algorithm).descriptor.key_length


class SymmetricCipherSuite:
    """
    One encrypt/decrypt pair for every symmetric algorithm.

    Text methods take a str (UTF-8 encoded) or bytes plaintext and
    return Base64; the ``*_bytes`` variants skip the text layer.
    """

    @staticmethod
    def encrypt_bytes(algorithm: str | Algorithm, plaintext: bytes,
                      key: str | bytes, **params) -> bytes:
        cipher = CipherFactory.create(algorithm, to_bytes(key), **params)
        return cipher.encrypt(plaintext)

    @staticmethod
    def decrypt_bytes(algorithm: str | Algorithm, envelope: bytes,
                      key: str | bytes, **params) -> bytes:
        cipher = CipherFactory.create(algorithm, to_bytes(key), **params)
        return cipher.decrypt(envelope)

    @classmethod
    def encrypt(cls, algorithm: str | Algorithm, plaintext: str | bytes,
                key: str | bytes, **params) -> str:
        envelope = cls.encrypt_bytes(
            algorithm, to_bytes(plaintext), key, **params
        )
        return encode_base64(envelope)

    @classmethod
    def decrypt(cls, algorithm: str | Algorithm, envelope: str | bytes,
                key: str | bytes, **params) -> str:
        cipher = CipherFactory.create(algorithm, to_bytes(key), **params)
        return to_text(cipher.decrypt(decode_base64(envelope)))
