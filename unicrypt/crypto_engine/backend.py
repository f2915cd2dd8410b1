"""
One-time backend initialisation and capability probing.

``cryptography`` links OpenSSL, whose legacy provider is what exposes
IDEA and 3DES; SM3 depends on how OpenSSL was built.  The first call to
``ensure_initialized()`` (from any thread) probes those primitives once
and records the result.  Later calls return the cached capabilities
without taking the lock.
"""

import logging
import threading

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, hmac
from cryptography.hazmat.primitives.ciphers import Cipher, modes
from cryptography.hazmat.decrepit.ciphers import algorithms as decrepit

from ..config import Settings
from .errors import UnsupportedAlgorithmError

logger = logging.getLogger("UniCrypt.Backend")

_lock = threading.Lock()
_capabilities: frozenset[str] | None = None


def _probe_sm3():
    hashes.Hash(hashes.SM3()).finalize()


def _probe_hmac_sm3():
    hmac.HMAC(b"probe", hashes.SM3()).finalize()


def _probe_idea():
    Cipher(
        decrepit.IDEA(bytes(16)), modes.CBC(Settings.LEGACY_IV)
    ).encryptor()


def _probe_triple_des():
    Cipher(
        decrepit.TripleDES(bytes(range(24))), modes.CBC(Settings.LEGACY_IV)
    ).encryptor()


_PROBES = {
    "SM3":      _probe_sm3,
    "HMAC-SM3": _probe_hmac_sm3,
    "IDEA":     _probe_idea,
    "3DES":     _probe_triple_des,
}


def _run_probes() -> frozenset[str]:
    found = set()
    for name, probe in _PROBES.items():
        try:
            probe()
        except (UnsupportedAlgorithm, ValueError) as exc:
            logger.warning("%s not available in this backend: %s",
                           name, exc)
            continue
        found.add(name)
    return frozenset(found)


def ensure_initialized() -> frozenset[str]:
    """Probe the backend exactly once; return the available names."""
    global _capabilities
    if _capabilities is not None:
        return _capabilities
    with _lock:
        if _capabilities is None:
            _capabilities = _run_probes()
            logger.info(
                "Crypto backend ready (optional primitives: %s)",
                ", ".join(sorted(_capabilities)) or "none",
            )
    return _capabilities


def is_supported(capability: str) -> bool:
    return capability in ensure_initialized()


def require(capability: str) -> None:
    if not is_supported(capability):
        raise UnsupportedAlgorithmError(
            f"{capability} is not supported by the linked crypto backend"
        )
