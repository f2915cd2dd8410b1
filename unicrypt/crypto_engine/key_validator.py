"""
Key-length checks that run before any primitive is constructed.

Only descriptors with a declared ``key_length`` are enforced
(AES-256-GCM, 3DES).  AES-ECB, DES, RC5, IDEA and RC4 hand the raw
bytes straight to the primitive, whose own key schedule decides what
it accepts.
"""

import logging

from .descriptors import AlgorithmDescriptor
from .errors import KeyLengthError

logger = logging.getLogger("UniCrypt.KeyValidator")


class KeyValidator:

    @staticmethod
    def validate(descriptor: AlgorithmDescriptor, key: bytes) -> None:
        if not descriptor.enforces_key_length:
            return
        if len(key) != descriptor.key_length:
            logger.debug(
                "Rejected %s key: expected %d bytes, got %d",
                descriptor.name, descriptor.key_length, len(key),
            )
            raise KeyLengthError(
                descriptor.name, descriptor.key_length, len(key)
            )
