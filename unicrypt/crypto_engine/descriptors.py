"""
Algorithm descriptors — the central table of every supported cipher.

Each ``Algorithm`` member carries one immutable ``AlgorithmDescriptor``
stating its block size, enforced key length, mode, padding, IV policy
and whether it authenticates.  The cipher classes read their policy
from here instead of hard-coding it per call site.
"""

from dataclasses import dataclass
from enum import Enum

from ..config import Settings
from .errors import UnsupportedAlgorithmError


class Mode(Enum):
    ECB    = "ECB"
    CBC    = "CBC"
    GCM    = "GCM"
    STREAM = "STREAM"


class Padding(Enum):
    PKCS5 = "PKCS#5"
    PKCS7 = "PKCS#7"
    ZERO  = "zero"
    NONE  = "none"


class IVPolicy(Enum):
    NONE       = "none"
    RANDOM     = "random per call"
    FIXED_ZERO = "fixed all-zero"


@dataclass(frozen=True)
class AlgorithmDescriptor:
    name:          str
    block_size:    int            # bytes; 1 for stream ciphers
    key_length:    int | None     # None → length not enforced
    mode:          Mode
    padding:       Padding
    authenticated: bool
    iv_length:     int
    iv_policy:     IVPolicy
    category:      str
    security:      str
    security_note: str = ""

    @property
    def enforces_key_length(self) -> bool:
        return self.key_length is not None

    def info(self) -> dict:
        """Return descriptor metadata for display."""
        return {
            "name":          self.name,
            "block_bytes":   self.block_size,
            "key_bytes":     self.key_length,
            "mode":          self.mode.value,
            "padding":       self.padding.value,
            "aead":          self.authenticated,
            "iv_bytes":      self.iv_length,
            "iv_policy":     self.iv_policy.value,
            "category":      self.category,
            "security":      self.security,
            "security_note": self.security_note,
        }


class Algorithm(Enum):
    """Closed set of symmetric algorithms the suite can run."""

    AES_ECB = AlgorithmDescriptor(
        name="AES-128-ECB",
        block_size=16,
        key_length=None,
        mode=Mode.ECB,
        padding=Padding.PKCS5,
        authenticated=False,
        iv_length=0,
        iv_policy=IVPolicy.NONE,
        category="Legacy block",
        security="Low (ECB leaks patterns)",
        security_note=(
            "ECB encrypts equal blocks to equal ciphertext. "
            "Prefer AES-256-GCM."
        ),
    )
    AES_GCM = AlgorithmDescriptor(
        name="AES-256-GCM",
        block_size=16,
        key_length=32,
        mode=Mode.GCM,
        padding=Padding.NONE,
        authenticated=True,
        iv_length=Settings.GCM_NONCE_SIZE,
        iv_policy=IVPolicy.RANDOM,
        category="AEAD",
        security="Very High (256-bit)",
        security_note="Recommended. Authenticated, random 96-bit nonce.",
    )
    DES_CBC = AlgorithmDescriptor(
        name="DES-CBC",
        block_size=8,
        key_length=None,
        mode=Mode.CBC,
        padding=Padding.PKCS5,
        authenticated=False,
        iv_length=8,
        iv_policy=IVPolicy.FIXED_ZERO,
        category="Legacy block",
        security="Broken (56-bit key)",
        security_note=(
            "56-bit effective key is brute-forceable. Fixed zero IV "
            "makes output deterministic."
        ),
    )
    TRIPLE_DES_CBC = AlgorithmDescriptor(
        name="3DES-CBC",
        block_size=8,
        key_length=24,
        mode=Mode.CBC,
        padding=Padding.PKCS5,
        authenticated=False,
        iv_length=8,
        iv_policy=IVPolicy.FIXED_ZERO,
        category="Legacy block",
        security="Medium (~112-bit)",
        security_note=(
            "3DES is being retired by NIST. Fixed zero IV makes "
            "output deterministic."
        ),
    )
    RC5 = AlgorithmDescriptor(
        name="RC5",
        block_size=16,
        key_length=None,
        mode=Mode.ECB,
        padding=Padding.ZERO,
        authenticated=False,
        iv_length=0,
        iv_policy=IVPolicy.NONE,
        category="Legacy block",
        security="Low (ECB, lossy padding)",
        security_note=(
            "Fewer than 12 rounds is weak. Trailing zero bytes of the "
            "plaintext are lost on decrypt."
        ),
    )
    IDEA_CBC = AlgorithmDescriptor(
        name="IDEA-CBC",
        block_size=8,
        key_length=None,
        mode=Mode.CBC,
        padding=Padding.PKCS7,
        authenticated=False,
        iv_length=8,
        iv_policy=IVPolicy.FIXED_ZERO,
        category="Legacy block",
        security="Medium (64-bit block)",
        security_note="Little used today; 64-bit block limits data volume.",
    )
    RC4 = AlgorithmDescriptor(
        name="RC4",
        block_size=1,
        key_length=None,
        mode=Mode.STREAM,
        padding=Padding.NONE,
        authenticated=False,
        iv_length=0,
        iv_policy=IVPolicy.NONE,
        category="Legacy stream",
        security="Broken (RFC 7465)",
        security_note="Keystream biases are exploitable. Legacy interop only.",
    )

    @property
    def descriptor(self) -> AlgorithmDescriptor:
        return self.value

    @classmethod
    def from_name(cls, name: "str | Algorithm") -> "Algorithm":
        """Resolve ``"aes-256-gcm"``, ``"AES_GCM"`` or a member itself."""
        if isinstance(name, cls):
            return name
        wanted = str(name).strip().upper()
        for member in cls:
            if wanted in (member.name, member.value.name.upper()):
                return member
        raise UnsupportedAlgorithmError(
            f"Unknown algorithm: {name}. "
            f"Available: {[m.value.name for m in cls]}"
        )
