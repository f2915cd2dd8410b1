"""
UniCrypt — Cipher Verification Script

Run this to verify every cipher works correctly:
    python verify_ciphers.py
"""

import os
import sys
import time

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from unicrypt.crypto_engine import (
    CipherFactory, CryptoError, IntegrityError, ensure_initialized,
)
from unicrypt.utils import setup_logging

# Key per algorithm: enforced lengths where the descriptor has one.
KEYS = {
    "AES-128-ECB": b"0123456789abcdef",
    "AES-256-GCM": b"0123456789abcdef0123456789abcdef",
    "DES-CBC":     b"12345678",
    "3DES-CBC":    b"0123456789abcdefghijklmn",
    "RC5":         b"rc5-secret-key",
    "IDEA-CBC":    b"idea-secret-key!",
    "RC4":         b"rc4-secret-key",
}
WRONG_KEYS = {
    name: bytes(b ^ 0x5A for b in key) for name, key in KEYS.items()
}


def main():
    setup_logging("WARNING")
    print("╔══════════════════════════════════════════════════╗")
    print("║      UniCrypt — Cipher Verification Suite        ║")
    print("╚══════════════════════════════════════════════════╝")
    print()
    print(f"  Backend extras: {', '.join(sorted(ensure_initialized()))}")
    print()

    # ── Test 1: Basic encrypt/decrypt ────────────────────────────
    print("━━━ Test 1: Encrypt → Decrypt Round-Trip ━━━━━━━━━━")
    test_messages = [
        b"Hello, World!",
        b"",                                     # empty
        "多语言文本 — ünïcødé".encode(),
        b"A" * 10_000,                            # 10 KB
    ]
    all_pass = True

    for name in CipherFactory.list_ciphers():
        cipher = CipherFactory.create(name, KEYS[name])
        ok = True
        for msg in test_messages:
            try:
                decrypted = cipher.decrypt(cipher.encrypt(msg))
            except CryptoError as exc:
                print(f"  ❌ {name:<15s} ERROR: {exc}")
                ok = False
                break
            if decrypted != msg:
                ok = False
                break

        if ok:
            info = cipher.info()
            print(
                f"  ✅ {name:<15s}  "
                f"key={info['key_bits']:>3d}bit  "
                f"iv={info['iv_policy']:<16s}"
            )
        else:
            print(f"  ❌ {name:<15s}  FAILED")
            all_pass = False

    print()

    # ── Test 2: Tamper detection ─────────────────────────────────
    print("━━━ Test 2: Tamper Detection ━━━━━━━━━━━━━━━━━━━━━━")
    for name in CipherFactory.list_ciphers():
        cipher = CipherFactory.create(name, KEYS[name])
        encrypted = cipher.encrypt(b"Test tamper detection")

        # Flip a byte in the middle of ciphertext
        tampered = bytearray(encrypted)
        mid = len(tampered) // 2
        tampered[mid] ^= 0xFF
        tampered = bytes(tampered)

        try:
            cipher.decrypt(tampered)
            if cipher.is_aead:
                print(f"  ⚠️  {name:<15s}  NO tamper detection!")
                all_pass = False
            else:
                print(f"  ➖ {name:<15s}  Unauthenticated (expected)")
        except IntegrityError:
            print(f"  ✅ {name:<15s}  Tamper detected correctly")
        except CryptoError:
            print(f"  ➖ {name:<15s}  Rejected by padding check")

    print()

    # ── Test 3: Different keys cannot decrypt ────────────────────
    print("━━━ Test 3: Wrong Key Rejection ━━━━━━━━━━━━━━━━━━━")
    for name in CipherFactory.list_ciphers():
        cipher1 = CipherFactory.create(name, KEYS[name])
        cipher2 = CipherFactory.create(name, WRONG_KEYS[name])
        encrypted = cipher1.encrypt(b"Secret message")

        try:
            result = cipher2.decrypt(encrypted)
        except CryptoError:
            print(f"  ✅ {name:<15s}  Wrong key rejected")
            continue
        if result == b"Secret message":
            print(f"  ⚠️  {name:<15s}  Decrypted with wrong key!")
            all_pass = False
        else:
            print(f"  ✅ {name:<15s}  Wrong key gives garbage")

    print()

    # ── Test 4: Benchmark ────────────────────────────────────────
    print("━━━ Test 4: Performance Benchmark (64 KB) ━━━━━━━━━")
    data = os.urandom(64 * 1024).replace(b"\x00", b"\x01")

    for name in CipherFactory.list_ciphers():
        cipher = CipherFactory.create(name, KEYS[name])

        t0 = time.perf_counter()
        enc = cipher.encrypt(data)
        t_enc = time.perf_counter() - t0

        t0 = time.perf_counter()
        cipher.decrypt(enc)
        t_dec = time.perf_counter() - t0

        overhead = len(enc) - len(data)
        print(
            f"  {name:<15s}  "
            f"enc={t_enc * 1000:>8.2f}ms  "
            f"dec={t_dec * 1000:>8.2f}ms  "
            f"overhead={overhead:>3d}B"
        )

    print()
    print("━━━ Summary ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━")
    print(f"  Total ciphers tested: {len(CipherFactory.list_ciphers())}")
    if all_pass:
        print("  Result:               🎉 ALL TESTS PASSED")
    else:
        print("  Result:               ⚠️  SOME TESTS FAILED")
    print()
    return 0 if all_pass else 1


if __name__ == "__main__":
    sys.exit(main())
