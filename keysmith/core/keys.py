import hmac


class SecretKey:
    """Opaque symmetric key tagged with the algorithm it was generated for.

    The raw bytes are exposed through ``encoded``; they never show up in
    ``repr()``.
    """

    __slots__ = ("_algorithm", "_key_bytes")

    def __init__(self, algorithm: str, key_bytes: bytes):
        if not algorithm:
            raise ValueError("Algorithm name must not be empty")
        if not key_bytes:
            raise ValueError("Key material must not be empty")
        object.__setattr__(self, "_algorithm", algorithm)
        object.__setattr__(self, "_key_bytes", bytes(key_bytes))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def encoded(self) -> bytes:
        return self._key_bytes

    @property
    def format(self) -> str:
        return "RAW"

    def __len__(self) -> int:
        return len(self._key_bytes)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SecretKey):
            return NotImplemented
        return (self._algorithm.lower() == other._algorithm.lower()
                and hmac.compare_digest(self._key_bytes, other._key_bytes))

    def __hash__(self) -> int:
        # Hash on public attributes only
        return hash((self._algorithm.lower(), len(self._key_bytes)))

    def __repr__(self) -> str:
        return f"SecretKey(algorithm={self._algorithm!r}, length={len(self._key_bytes)})"
