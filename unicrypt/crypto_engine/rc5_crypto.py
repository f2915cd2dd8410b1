"""
RC5-64 block cipher — 64-bit words, 128-bit block, variable rounds.

Neither ``cryptography`` nor ``pycryptodome`` ships RC5, so the block
function and key expansion live here (RFC 2040 with w = 64, words read
little-endian).  Blocks are processed independently (ECB).

Padding: the plaintext is zero-filled up to a whole block on encrypt,
and every trailing zero byte is stripped on decrypt.  A plaintext that
itself ends in ``\\x00`` therefore does not round-trip; the envelope
format depends on this scheme, so it is kept.
"""

import logging

from ..config import Settings
from .descriptors import Algorithm
from .errors import CipherOperationError
from .symmetric_base import SymmetricCipher

logger = logging.getLogger("UniCrypt.RC5")

WORD_BITS  = 64
WORD_BYTES = WORD_BITS // 8
MASK       = (1 << WORD_BITS) - 1

# Magic constants for w = 64: Odd((e - 2)·2^64), Odd((φ - 1)·2^64)
P64 = 0xB7E151628AED2A6B
Q64 = 0x9E3779B97F4A7C15


def _rotl(x: int, s: int) -> int:
    s &= WORD_BITS - 1
    return ((x << s) | (x >> (WORD_BITS - s))) & MASK


def _rotr(x: int, s: int) -> int:
    s &= WORD_BITS - 1
    return ((x >> s) | (x << (WORD_BITS - s))) & MASK


def expand_key(key: bytes, rounds: int) -> list[int]:
    """Build the 2·(rounds + 1) word round-key table S."""
    c = max(1, -(-len(key) // WORD_BYTES))
    L = [
        int.from_bytes(key[i * WORD_BYTES:(i + 1) * WORD_BYTES], "little")
        for i in range(c)
    ]

    t = 2 * (rounds + 1)
    S = [P64]
    for _ in range(1, t):
        S.append((S[-1] + Q64) & MASK)

    A = B = i = j = 0
    for _ in range(3 * max(t, c)):
        A = S[i] = _rotl((S[i] + A + B) & MASK, 3)
        B = L[j] = _rotl((L[j] + A + B) & MASK, A + B)
        i = (i + 1) % t
        j = (j + 1) % c
    return S


def encrypt_block(block: bytes, S: list[int], rounds: int) -> bytes:
    A = (int.from_bytes(block[:WORD_BYTES], "little") + S[0]) & MASK
    B = (int.from_bytes(block[WORD_BYTES:], "little") + S[1]) & MASK
    for r in range(1, rounds + 1):
        A = (_rotl(A ^ B, B) + S[2 * r]) & MASK
        B = (_rotl(B ^ A, A) + S[2 * r + 1]) & MASK
    return A.to_bytes(WORD_BYTES, "little") + B.to_bytes(WORD_BYTES, "little")


def decrypt_block(block: bytes, S: list[int], rounds: int) -> bytes:
    A = int.from_bytes(block[:WORD_BYTES], "little")
    B = int.from_bytes(block[WORD_BYTES:], "little")
    for r in range(rounds, 0, -1):
        B = _rotr((B - S[2 * r + 1]) & MASK, A) ^ A
        A = _rotr((A - S[2 * r]) & MASK, B) ^ B
    A = (A - S[0]) & MASK
    B = (B - S[1]) & MASK
    return A.to_bytes(WORD_BYTES, "little") + B.to_bytes(WORD_BYTES, "little")


class RC5Cipher(SymmetricCipher):
    """
    RC5-64 with zero padding, blocks processed independently.

    Output format:  [ciphertext zero-padded to 16B blocks]

    Rounds: 0–255 (12 or more recommended).
    Key:    up to 255 bytes, not length-checked beforehand.
    """
    ALGORITHM  = Algorithm.RC5
    BLOCK_SIZE = 2 * WORD_BYTES

    def __init__(self, key: bytes, rounds: int = Settings.DEFAULT_RC5_ROUNDS):
        super().__init__(key)
        if isinstance(rounds, bool) or not isinstance(rounds, int):
            raise CipherOperationError(
                f"RC5 rounds must be an integer, got {type(rounds).__name__}"
            )
        if not 0 <= rounds <= Settings.RC5_MAX_ROUNDS:
            raise CipherOperationError(
                f"RC5 rounds must be between 0 and "
                f"{Settings.RC5_MAX_ROUNDS}, got {rounds}"
            )
        if len(key) > Settings.RC5_MAX_KEY_BYTES:
            raise CipherOperationError(
                f"RC5 key can be no longer than "
                f"{Settings.RC5_MAX_KEY_BYTES} bytes, got {len(key)}"
            )
        if rounds < 12:
            logger.warning("RC5 with %d rounds is below the 12-round "
                           "recommendation", rounds)
        self._rounds = rounds
        self._S      = expand_key(key, rounds)

    @property
    def rounds(self) -> int:
        return self._rounds

    def encrypt(self, plaintext: bytes) -> bytes:
        remainder = len(plaintext) % self.BLOCK_SIZE
        if remainder:
            plaintext += bytes(self.BLOCK_SIZE - remainder)
        return b"".join(
            encrypt_block(plaintext[i:i + self.BLOCK_SIZE],
                          self._S, self._rounds)
            for i in range(0, len(plaintext), self.BLOCK_SIZE)
        )

    def decrypt(self, data: bytes) -> bytes:
        if len(data) % self.BLOCK_SIZE:
            raise CipherOperationError(
                f"RC5 ciphertext length {len(data)} is not a multiple "
                f"of {self.BLOCK_SIZE}"
            )
        padded = b"".join(
            decrypt_block(data[i:i + self.BLOCK_SIZE],
                          self._S, self._rounds)
            for i in range(0, len(data), self.BLOCK_SIZE)
        )
        return padded.rstrip(b"\x00")

    def info(self) -> dict:
        base = super().info()
        base["rounds"] = self._rounds
        return base
