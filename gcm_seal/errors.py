"""
Errors raised by gcm_seal.

Every error derives from AEADError. Messages carry lengths only: key bytes,
nonce values and payloads never appear in a message or traceback.
"""


class AEADError(Exception):
    """Base class for gcm_seal errors."""


class InvalidKeyLength(AEADError, ValueError):
    """Key is not exactly KEY_SIZE bytes. Raised before any cipher work."""

    def __init__(self, length: int, expected: int = 32):
        super().__init__(f"AES-256 key must be {expected} bytes, got {length}.")
        self.length = length


class InvalidNonceLength(AEADError, ValueError):
    """Nonce handed to decrypt() is not exactly NONCE_SIZE bytes."""

    def __init__(self, length: int, expected: int = 12):
        super().__init__(f"GCM nonce must be {expected} bytes, got {length}.")
        self.length = length


class AuthenticationFailure(AEADError):
    """
    Decryption failed authentication.

    Wrong key, wrong nonce, tampered ciphertext, tampered tag and truncated
    input all produce this same error with the same message.
    """

    def __init__(self):
        super().__init__("Authentication failed.")


class CipherInitError(AEADError, RuntimeError):
    """The AES-GCM primitive could not be set up or could not seal."""
