class Settings:
    """Centralised library configuration."""

    # ── application ──────────────────────────────────────────────
    APP_NAME    = "UniCrypt"
    APP_VERSION = "1.0.0"

    # ── text handling ────────────────────────────────────────────
    TEXT_ENCODING = "utf-8"

    # ── crypto defaults ──────────────────────────────────────────
    RSA_KEY_SIZE        = 2048
    RSA_PUBLIC_EXPONENT = 65537
    RSA_PKCS1_OVERHEAD  = 11         # bytes reserved by PKCS#1 v1.5
    RSA_SENTINEL_SIZE   = 32

    GCM_NONCE_SIZE = 12
    GCM_TAG_SIZE   = 16

    # Fixed IV shared by every legacy CBC mode (DES, 3DES, IDEA).
    LEGACY_IV = bytes(8)

    DEFAULT_RC5_ROUNDS = 12
    RC5_MAX_ROUNDS     = 255
    RC5_MAX_KEY_BYTES  = 255

    # ── logging ──────────────────────────────────────────────────
    LOG_LEVEL  = "INFO"
    LOG_FORMAT = "[%(asctime)s] [%(levelname)-8s] %(name)s — %(message)s"
    LOG_DATEFMT = "%H:%M:%S"
