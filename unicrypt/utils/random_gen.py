"""
Cryptographically-secure random value generators.

``os.urandom`` reads from the kernel CSPRNG on every call, so each
caller gets independent bytes and no shared generator state exists.
"""

import os

from ..config import Settings


class SecureRandom:

    @staticmethod
    def generate_bytes(length: int) -> bytes:
        return os.urandom(length)

    @staticmethod
    def generate_nonce(length: int = Settings.GCM_NONCE_SIZE) -> bytes:
        return os.urandom(length)
