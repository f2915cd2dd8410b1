"""
Text-in / text-out crypto tools.

Plain functions over the crypto engine: strings are UTF-8 encoded,
ciphertext and keys come back as Base64, digests as lowercase hex.

Legacy algorithms (MD5, AES-ECB, DES, 3DES, RC4, RC5, IDEA) are here
for interoperability with existing systems; new data should use
``aes256_encrypt`` (AES-256-GCM) or RSA.
"""

from cryptography.hazmat.primitives.asymmetric import rsa

from .config import Settings
from .crypto_engine import Algorithm, HashCrypto, RSACrypto, SymmetricCipherSuite

_rsa = RSACrypto()


# ── hashing ──────────────────────────────────────────────────────
def sm3(text: str) -> str:
    return HashCrypto.sm3(text)


def hmac_sm3(key: str, text: str) -> str:
    return HashCrypto.hmac_sm3(key, text)


def hmac_sm3_with_salt(key: str, text: str, salt: bytes) -> str:
    return HashCrypto.hmac_sm3_with_salt(key, text, salt)


def md5(text: str) -> str:
    return HashCrypto.md5(text)


def sha256(text: str) -> str:
    return HashCrypto.sha256(text)


# ── AES ──────────────────────────────────────────────────────────
def aes_encrypt(text: str, key: str) -> str:
    """AES/ECB/PKCS5 (legacy)."""
    return SymmetricCipherSuite.encrypt(Algorithm.AES_ECB, text, key)


def aes_decrypt(ciphertext: str, key: str) -> str:
    return SymmetricCipherSuite.decrypt(Algorithm.AES_ECB, ciphertext, key)


def aes256_encrypt(text: str, key: str) -> str:
    """AES-256-GCM; the random nonce is embedded in the output."""
    return SymmetricCipherSuite.encrypt(Algorithm.AES_GCM, text, key)


def aes256_decrypt(ciphertext: str, key: str) -> str:
    return SymmetricCipherSuite.decrypt(Algorithm.AES_GCM, ciphertext, key)


# ── DES / 3DES ───────────────────────────────────────────────────
def des_encrypt(text: str, key: str) -> str:
    return SymmetricCipherSuite.encrypt(Algorithm.DES_CBC, text, key)


def des_decrypt(ciphertext: str, key: str) -> str:
    return SymmetricCipherSuite.decrypt(Algorithm.DES_CBC, ciphertext, key)


def triple_des_encrypt(text: str, key: str) -> str:
    return SymmetricCipherSuite.encrypt(Algorithm.TRIPLE_DES_CBC, text, key)


def triple_des_decrypt(ciphertext: str, key: str) -> str:
    return SymmetricCipherSuite.decrypt(
        Algorithm.TRIPLE_DES_CBC, ciphertext, key
    )


# ── RC5 / IDEA / RC4 ─────────────────────────────────────────────
def rc5_encrypt(text: str, key: str,
                rounds: int = Settings.DEFAULT_RC5_ROUNDS) -> str:
    return SymmetricCipherSuite.encrypt(Algorithm.RC5, text, key,
                                        rounds=rounds)


def rc5_decrypt(ciphertext: str, key: str,
                rounds: int = Settings.DEFAULT_RC5_ROUNDS) -> str:
    return SymmetricCipherSuite.decrypt(Algorithm.RC5, ciphertext, key,
                                        rounds=rounds)


def idea_encrypt(text: str, key: str) -> str:
    return SymmetricCipherSuite.encrypt(Algorithm.IDEA_CBC, text, key)


def idea_decrypt(ciphertext: str, key: str) -> str:
    return SymmetricCipherSuite.decrypt(Algorithm.IDEA_CBC, ciphertext, key)


def rc4_encrypt(text: str, key: str) -> str:
    return SymmetricCipherSuite.encrypt(Algorithm.RC4, text, key)


def rc4_decrypt(ciphertext: str, key: str) -> str:
    return SymmetricCipherSuite.decrypt(Algorithm.RC4, ciphertext, key)


# ── RSA ──────────────────────────────────────────────────────────
def generate_rsa_key_pair() -> tuple[rsa.RSAPublicKey, rsa.RSAPrivateKey]:
    """Return *(public_key, private_key)*, 2048-bit."""
    return _rsa.generate_keys()


def rsa_encrypt(text: str, public_key: rsa.RSAPublicKey) -> str:
    return _rsa.encrypt(text, public_key)


def rsa_decrypt(ciphertext: str, private_key: rsa.RSAPrivateKey) -> str:
    return _rsa.decrypt(ciphertext, private_key)


def get_public_key(base64_der: str) -> rsa.RSAPublicKey:
    return RSACrypto.import_public_key(base64_der)


def get_private_key(base64_der: str) -> rsa.RSAPrivateKey:
    return RSACrypto.import_private_key(base64_der)


def export_public_key(public_key: rsa.RSAPublicKey) -> str:
    return RSACrypto.export_public_key(public_key)


def export_private_key(private_key: rsa.RSAPrivateKey) -> str:
    return RSACrypto.export_private_key(private_key)
