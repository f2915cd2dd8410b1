"""
Binary ⇄ text encoding: Base64 for envelopes and keys, hex for digests.
"""

import base64
import binascii

from ..config import Settings
from .errors import DecodeError


def to_bytes(value: str | bytes) -> bytes:
    """UTF-8 encode text; bytes pass through untouched."""
    if isinstance(value, bytes):
        return value
    return value.encode(Settings.TEXT_ENCODING)


def to_text(data: bytes) -> str:
    try:
        return data.decode(Settings.TEXT_ENCODING)
    except UnicodeDecodeError as exc:
        raise DecodeError("decrypted bytes are not valid UTF-8") from exc


def encode_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def decode_base64(text: str | bytes) -> bytes:
    """Strict Base64 decode: standard alphabet, correct padding."""
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"malformed Base64 input: {exc}") from exc


def encode_hex(data: bytes) -> str:
    return data.hex()


def decode_hex(text: str) -> bytes:
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise DecodeError(f"malformed hex input: {exc}") from exc
