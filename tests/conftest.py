import pytest

from unicrypt.crypto_engine.rsa_crypto import RSACrypto


@pytest.fixture(scope="session")
def rsa_key_pair():
    """One 2048-bit key pair shared by the RSA tests (generation is slow)."""
    return RSACrypto().generate_keys()


@pytest.fixture
def gcm_key():
    return "0123456789abcdef0123456789abcdef"
