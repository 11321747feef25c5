"""Randomness sources used to fill key material."""

import secrets
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Cryptographically secure byte source contract."""

    def fill(self, length: int) -> bytes: ...


class SystemRandomSource:
    """Default source backed by the operating system CSPRNG."""

    def fill(self, length: int) -> bytes:
        return secrets.token_bytes(length)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
