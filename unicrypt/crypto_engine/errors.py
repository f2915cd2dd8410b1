"""
Exception hierarchy for the crypto engine.

Every failure surfaces as a subclass of ``CryptoError``.  Messages
describe what failed, never the key, IV or plaintext involved.

``IntegrityError`` is intentionally a sibling of
``CipherOperationError`` rather than a subclass, so that a handler for
generic cipher failures never absorbs a failed authentication check.
"""


class CryptoError(Exception):
    """Base exception for all UniCrypt failures."""


class KeyLengthError(CryptoError):
    """Key size does not match the length an algorithm enforces."""

    def __init__(self, algorithm: str, expected: int, actual: int):
        self.algorithm = algorithm
        self.expected  = expected
        self.actual    = actual
        super().__init__(
            f"{algorithm} key must be exactly {expected} bytes, "
            f"got {actual}"
        )


class KeyFormatError(CryptoError):
    """Malformed Base64 or DER key material."""


class DecodeError(CryptoError):
    """Malformed Base64/hex input or undecodable text."""


class PlaintextTooLargeError(CryptoError):
    """Plaintext exceeds the capacity of a single RSA block."""

    def __init__(self, limit: int, actual: int):
        self.limit  = limit
        self.actual = actual
        super().__init__(
            f"plaintext is {actual} bytes, RSA block holds at most {limit}"
        )


class IntegrityError(CryptoError):
    """Authentication tag check failed; the ciphertext is not trusted."""


class CipherOperationError(CryptoError):
    """Any other primitive failure (bad padding, bad rounds, bad key…)."""


class UnsupportedAlgorithmError(CryptoError):
    """Unknown algorithm name, or the backend lacks the primitive."""
