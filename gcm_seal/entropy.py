"""
Random sources for nonce generation.

encrypt() takes any object with a token_bytes(n) method. Production code
passes nothing and gets SystemRandomSource, which reads the OS CSPRNG.
Tests pass their own source to get reproducible nonces.
"""

import os
from typing import Protocol


class RandomSource(Protocol):
    """Anything that can hand out n random bytes."""

    def token_bytes(self, n: int) -> bytes:
        ...


class SystemRandomSource:
    """os.urandom backed source. Stateless, safe to share across threads."""

    def token_bytes(self, n: int) -> bytes:
        return os.urandom(n)

    def __repr__(self):
        return "SystemRandomSource()"


DEFAULT_SOURCE = SystemRandomSource()
