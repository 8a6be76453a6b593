"""
AES-256-GCM seal / open
=======================
AES-256 in Galois/Counter Mode with empty associated data.

Key:   256 bits (32 bytes), caller-owned, never kept past a call
Nonce:  96 bits (12 bytes), fresh from the random source on every encrypt()
Tag:   128 bits (16 bytes), appended to the ciphertext

encrypt() returns (ciphertext || tag, nonce). The caller stores the nonce
next to the ciphertext; seal_bundle()/open_bundle() do that for you with
the layout nonce(12) || ciphertext || tag(16).

There is no way to pass a nonce to encrypt(). Reusing a nonce under one key
leaks the XOR of the plaintexts and the GHASH key.

Dependencies: cryptography >= 41.0
"""

import logging
from typing import Optional, Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .entropy import DEFAULT_SOURCE, RandomSource
from .errors import (
    AuthenticationFailure,
    CipherInitError,
    InvalidKeyLength,
    InvalidNonceLength,
)

logger = logging.getLogger(__name__)

KEY_SIZE   = 32   # 256-bit key
NONCE_SIZE = 12   # 96-bit nonce (GCM standard)
TAG_SIZE   = 16   # 128-bit tag


def _check_key(key: bytes) -> None:
    if len(key) != KEY_SIZE:
        raise InvalidKeyLength(len(key), KEY_SIZE)


def _cipher(key: bytes) -> AESGCM:
    try:
        return AESGCM(bytes(key))
    except (ValueError, TypeError) as exc:
        raise CipherInitError(f"AES-GCM setup failed: {type(exc).__name__}") from None


def encrypt(key: bytes, plaintext: bytes,
            rng: Optional[RandomSource] = None) -> Tuple[bytes, bytes]:
    """
    Encrypt and authenticate plaintext under key.

    Returns (ciphertext || tag, nonce). The nonce is the one drawn from rng
    for this call and is the exact value used for sealing.

    Raises InvalidKeyLength if key is not 32 bytes, CipherInitError if the
    random source misbehaves or the primitive refuses to seal.
    """
    _check_key(key)
    source = rng if rng is not None else DEFAULT_SOURCE

    nonce = bytes(source.token_bytes(NONCE_SIZE))
    if len(nonce) != NONCE_SIZE:
        raise CipherInitError(
            f"Random source returned {len(nonce)} bytes, expected {NONCE_SIZE}."
        )

    aesgcm = _cipher(key)
    try:
        ct = aesgcm.encrypt(nonce, plaintext, None)
    except (ValueError, OverflowError) as exc:
        raise CipherInitError(f"AES-GCM seal failed: {type(exc).__name__}") from None

    logger.debug(f"Seal: pt={len(plaintext)}B ct={len(ct)}B")
    return ct, nonce


def decrypt(key: bytes, nonce: bytes, ciphertext: bytes) -> bytes:
    """
    Verify the tag and decrypt.

    Raises InvalidKeyLength / InvalidNonceLength for malformed inputs and
    AuthenticationFailure for everything else that goes wrong. No plaintext
    is returned unless the tag checks out.
    """
    _check_key(key)
    if len(nonce) != NONCE_SIZE:
        raise InvalidNonceLength(len(nonce), NONCE_SIZE)
    if len(ciphertext) < TAG_SIZE:
        logger.debug("Open: rejected")
        raise AuthenticationFailure()

    aesgcm = _cipher(key)
    try:
        pt = aesgcm.decrypt(bytes(nonce), ciphertext, None)
    except InvalidTag:
        logger.debug("Open: rejected")
        raise AuthenticationFailure() from None

    logger.debug(f"Open: ct={len(ciphertext)}B pt={len(pt)}B")
    return pt


def seal_bundle(key: bytes, plaintext: bytes,
                rng: Optional[RandomSource] = None) -> bytes:
    """Encrypt and return nonce(12) || ciphertext || tag(16)."""
    ct, nonce = encrypt(key, plaintext, rng)
    return nonce + ct


def open_bundle(key: bytes, bundle: bytes) -> bytes:
    """Reverse of seal_bundle(). Short bundles fail authentication."""
    _check_key(key)
    if len(bundle) < NONCE_SIZE + TAG_SIZE:
        raise AuthenticationFailure()
    nonce = bundle[:NONCE_SIZE]
    ct    = bundle[NONCE_SIZE:]
    return decrypt(key, nonce, ct)
