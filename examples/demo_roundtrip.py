"""
gcm_seal — Live Demo: seal, open, tamper
========================================
Run:  python examples/demo_roundtrip.py

Encrypts a message with AES-256-GCM, decrypts it, then shows that a
flipped bit, a wrong nonce and a wrong key are all rejected the same way.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gcm_seal import (
    encrypt, decrypt, seal_bundle, open_bundle,
    AuthenticationFailure, InvalidKeyLength,
)

LINE = "═" * 70
KEY  = b"an example very very secret key."
MSG  = b"hello world"

def header(step, name):
    print(f"\n{LINE}")
    print(f"  {step} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

def rejected(label, fn):
    try:
        fn()
    except AuthenticationFailure as e:
        ok(label, f"rejected ({e})")
    else:
        print(f"  ✗  {label}: ACCEPTED")

logging.basicConfig(level=logging.DEBUG, format=' %(name)s %(message)s')

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  gcm_seal — AES-256-GCM Demo")
print(LINE)
print(f"  Message: {MSG.decode()}\n")

# ── 1 ────────────────────────────────────────────────────────────────────────
header(1, "ENCRYPT / DECRYPT")
t0        = time.perf_counter()
ct, nonce = encrypt(KEY, MSG)
pt        = decrypt(KEY, nonce, ct)
elapsed   = time.perf_counter() - t0
ok("Key size",   "256 bits")
ok("Nonce",      f"{len(nonce)} bytes, {nonce.hex()}")
ok("Ciphertext", f"{len(ct)} bytes (data={len(MSG)} + tag=16)")
ok("Round-trip", f"{elapsed*1000:.2f} ms")
ok("Decrypted",  pt.decode())

# ── 2 ────────────────────────────────────────────────────────────────────────
header(2, "BUNDLE — nonce || ciphertext || tag")
bundle = seal_bundle(KEY, MSG)
ok("Bundle size", f"{len(bundle)} bytes")
ok("Decrypted",   open_bundle(KEY, bundle).decode())

# ── 3 ────────────────────────────────────────────────────────────────────────
header(3, "TAMPERING")
bad = bytearray(ct)
bad[0] ^= 0x01
rejected("Flipped ciphertext bit", lambda: decrypt(KEY, nonce, bytes(bad)))
rejected("Wrong nonce",            lambda: decrypt(KEY, os.urandom(12), ct))
rejected("Wrong key",              lambda: decrypt(os.urandom(32), nonce, ct))
rejected("Truncated",              lambda: decrypt(KEY, nonce, ct[:8]))
try:
    encrypt(b"too short", MSG)
except InvalidKeyLength as e:
    ok("Short key", f"refused ({e})")

print(f"\n{LINE}\n")
