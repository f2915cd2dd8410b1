"""
Tests for one-time backend initialisation, descriptors, key validation
and the logging helper.
"""

import logging
import threading
import time
from dataclasses import FrozenInstanceError

import pytest

import unicrypt
from unicrypt.config import Settings
from unicrypt.crypto_engine import backend
from unicrypt.crypto_engine.descriptors import Algorithm, IVPolicy, Mode
from unicrypt.crypto_engine.errors import (
    KeyLengthError, UnsupportedAlgorithmError,
)
from unicrypt.crypto_engine.key_validator import KeyValidator
from unicrypt.utils import SecureRandom, setup_logging


class TestBackendInit:

    def test_idempotent(self):
        assert backend.ensure_initialized() is backend.ensure_initialized()

    def test_concurrent_first_use_probes_once(self, monkeypatch):
        calls = []

        def slow_probes():
            calls.append(1)
            time.sleep(0.05)
            return frozenset({"SM3"})

        monkeypatch.setattr(backend, "_capabilities", None)
        monkeypatch.setattr(backend, "_run_probes", slow_probes)

        results = []
        threads = [
            threading.Thread(target=lambda: results.append(backend.ensure_initialized()))
            for _ in range(8)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(calls) == 1
        assert results == [frozenset({"SM3"})] * 8

    def test_require_missing_capability(self, monkeypatch):
        monkeypatch.setattr(backend, "_capabilities", frozenset())
        with pytest.raises(UnsupportedAlgorithmError):
            backend.require("IDEA")


class TestDescriptors:

    def test_descriptors_are_immutable(self):
        with pytest.raises(FrozenInstanceError):
            Algorithm.AES_GCM.descriptor.key_length = 16

    def test_gcm_policy(self):
        d = Algorithm.AES_GCM.descriptor
        assert d.mode is Mode.GCM
        assert d.authenticated
        assert d.iv_policy is IVPolicy.RANDOM
        assert d.iv_length == 12

    def test_only_gcm_is_authenticated(self):
        assert [a for a in Algorithm if a.descriptor.authenticated] == [Algorithm.AES_GCM]

    @pytest.mark.parametrize("member", [
        Algorithm.DES_CBC, Algorithm.TRIPLE_DES_CBC, Algorithm.IDEA_CBC,
    ])
    def test_legacy_cbc_uses_fixed_iv(self, member):
        assert member.descriptor.iv_policy is IVPolicy.FIXED_ZERO
        assert member.descriptor.iv_length == 8

    def test_from_name_passes_members_through(self):
        assert Algorithm.from_name(Algorithm.RC4) is Algorithm.RC4


class TestKeyValidator:

    def test_enforced_lengths(self):
        KeyValidator.validate(Algorithm.AES_GCM.descriptor, bytes(32))
        KeyValidator.validate(Algorithm.TRIPLE_DES_CBC.descriptor, bytes(24))

    def test_mismatch(self):
        with pytest.raises(KeyLengthError) as info:
            KeyValidator.validate(Algorithm.AES_GCM.descriptor, bytes(31))
        assert (info.value.expected, info.value.actual) == (32, 31)
        assert "AES-256-GCM" in str(info.value)

    @pytest.mark.parametrize("member", [
        Algorithm.AES_ECB, Algorithm.DES_CBC, Algorithm.RC5,
        Algorithm.IDEA_CBC, Algorithm.RC4,
    ])
    def test_unchecked_algorithms_pass(self, member):
        KeyValidator.validate(member.descriptor, b"")
        KeyValidator.validate(member.descriptor, bytes(100))


class TestUtils:

    def test_nonces_are_independent(self):
        assert SecureRandom.generate_nonce() != SecureRandom.generate_nonce()
        assert len(SecureRandom.generate_nonce()) == 12

    def test_package_version(self):
        assert unicrypt.__version__ == Settings.APP_VERSION

    def test_setup_logging_is_idempotent(self):
        logger = setup_logging("DEBUG")
        count = len(logger.handlers)
        setup_logging("WARNING")
        assert len(logger.handlers) == count
        assert logger.level == logging.WARNING
