from .config import Settings
from .crypto_tools import (
    sm3, hmac_sm3, hmac_sm3_with_salt, md5, sha256,
    aes_encrypt, aes_decrypt, aes256_encrypt, aes256_decrypt,
    des_encrypt, des_decrypt, triple_des_encrypt, triple_des_decrypt,
    rc5_encrypt, rc5_decrypt, idea_encrypt, idea_decrypt,
    rc4_encrypt, rc4_decrypt,
    generate_rsa_key_pair, rsa_encrypt, rsa_decrypt,
    get_public_key, get_private_key, export_public_key, export_private_key,
)
from .crypto_engine import (
    Algorithm, CipherFactory, SymmetricCipherSuite, ensure_initialized,
    CryptoError, KeyLengthError, KeyFormatError, DecodeError,
    PlaintextTooLargeError, IntegrityError, CipherOperationError,
    UnsupportedAlgorithmError,
)

__version__ = Settings.APP_VERSION

__all__ = [
    "sm3", "hmac_sm3", "hmac_sm3_with_salt", "md5", "sha256",
    "aes_encrypt", "aes_decrypt", "aes256_encrypt", "aes256_decrypt",
    "des_encrypt", "des_decrypt", "triple_des_encrypt", "triple_des_decrypt",
    "rc5_encrypt", "rc5_decrypt", "idea_encrypt", "idea_decrypt",
    "rc4_encrypt", "rc4_decrypt",
    "generate_rsa_key_pair", "rsa_encrypt", "rsa_decrypt",
    "get_public_key", "get_private_key",
    "export_public_key", "export_private_key",
    "Algorithm", "CipherFactory", "SymmetricCipherSuite", "ensure_initialized",
    "CryptoError", "KeyLengthError", "KeyFormatError", "DecodeError",
    "PlaintextTooLargeError", "IntegrityError", "CipherOperationError",
    "UnsupportedAlgorithmError",
]
