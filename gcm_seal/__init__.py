"""
gcm_seal
========
Minimal authenticated encryption: AES-256-GCM with a fresh random
96-bit nonce per message and a 128-bit tag.

    ct, nonce = encrypt(key, b"hello world")
    decrypt(key, nonce, ct)            # -> b"hello world"

    bundle = seal_bundle(key, b"hello world")   # nonce || ct || tag
    open_bundle(key, bundle)

Any tampering with key, nonce, ciphertext or tag raises
AuthenticationFailure. Key management is left to the caller.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .aes_gcm  import (
    KEY_SIZE,
    NONCE_SIZE,
    TAG_SIZE,
    encrypt,
    decrypt,
    seal_bundle,
    open_bundle,
)
from .entropy  import RandomSource, SystemRandomSource
from .errors   import (
    AEADError,
    InvalidKeyLength,
    InvalidNonceLength,
    AuthenticationFailure,
    CipherInitError,
)

__all__ = [
    "KEY_SIZE",
    "NONCE_SIZE",
    "TAG_SIZE",
    "encrypt",
    "decrypt",
    "seal_bundle",
    "open_bundle",
    "RandomSource",
    "SystemRandomSource",
    "AEADError",
    "InvalidKeyLength",
    "InvalidNonceLength",
    "AuthenticationFailure",
    "CipherInitError",
]
