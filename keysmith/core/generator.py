import logging
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import InvalidKeySize, UnsupportedParameter
from .keys import SecretKey
from .sources import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)

# General minimum key size in bits enforced for every algorithm
MIN_KEY_SIZE = 40


class KeyGeneratorConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    algorithm_name: str = Field(..., min_length=1, description="Name attached to generated keys")
    default_key_size: int = Field(..., ge=1, description="Key size in bits used until a size is requested")

    # Algorithm-specific size constraints
    fixed_key_size: Optional[int] = Field(default=None, ge=1, description="The only accepted key size in bits")
    min_key_size: Optional[int] = Field(default=None, ge=1, description="Smallest accepted key size in bits")
    max_key_size: Optional[int] = Field(default=None, ge=1, description="Largest accepted key size in bits")

    aliases: Tuple[str, ...] = Field(default=(), description="Alternative names for registry lookup")

    @model_validator(mode="after")
    def validate_size_constraints(self):
        """A fixed size excludes a range, and a range must not be inverted."""
        has_range = self.min_key_size is not None or self.max_key_size is not None
        if self.fixed_key_size is not None and has_range:
            raise ValueError("fixed_key_size cannot be combined with min_key_size/max_key_size")

        if (self.min_key_size is not None and self.max_key_size is not None
                and self.min_key_size > self.max_key_size):
            raise ValueError("min_key_size must be <= max_key_size")

        return self

    def check_key_size(self, key_size: int) -> None:
        """Apply this algorithm's own size rule.

        Raises InvalidKeySize when ``key_size`` is rejected. The general
        minimum is not checked here; KeyGeneratorCore owns it.
        """
        name = self.algorithm_name

        if self.fixed_key_size is not None:
            if key_size != self.fixed_key_size:
                raise InvalidKeySize(f"Key length for {name} must be {self.fixed_key_size} bits")
            return

        low, high = self.min_key_size, self.max_key_size
        if low is not None and high is not None:
            if key_size < low or key_size > high:
                raise InvalidKeySize(f"Key length for {name} must be between {low} and {high} bits")
        elif low is not None and key_size < low:
            raise InvalidKeySize(f"Key length for {name} must be at least {low} bits")
        elif high is not None and key_size > high:
            raise InvalidKeySize(f"Key length for {name} must be at most {high} bits")


class KeyGeneratorCore:
    """Shared state and generation logic for one algorithm.

    Holds the current key size and the randomness source. A fresh core is
    already initialized to the default key size, so ``generate`` can be
    called straight away. A caller-supplied source is referenced, not
    copied; when none is given, a SystemRandomSource is created on first
    use and reused until the next reset.

    Instances are not safe for concurrent use without external locking.
    """

    def __init__(self, algorithm_name: str, default_key_size: int):
        self._algorithm_name = algorithm_name
        self._default_key_size = default_key_size
        self._key_size = default_key_size
        self._random_source: Optional[RandomSource] = None
        self.reset_to_default()

    @property
    def algorithm_name(self) -> str:
        return self._algorithm_name

    @property
    def default_key_size(self) -> int:
        return self._default_key_size

    @property
    def key_size(self) -> int:
        return self._key_size

    @property
    def random_source(self) -> Optional[RandomSource]:
        return self._random_source

    def reset_to_default(self, random_source: Optional[RandomSource] = None) -> None:
        self._key_size = self._default_key_size
        self._random_source = random_source
        logger.debug("%s generator reset to default key size %d bits",
                     self._algorithm_name, self._key_size)

    def reset_with_parameters(self, params: Any, random_source: Optional[RandomSource] = None) -> None:
        # No algorithm parameters are supported
        raise UnsupportedParameter(f"{self._algorithm_name} key generation does not take any parameters")

    def reset_with_size(self, key_size: int, random_source: Optional[RandomSource] = None) -> None:
        if key_size < MIN_KEY_SIZE:
            logger.debug("%s generator rejected key size %d bits", self._algorithm_name, key_size)
            raise InvalidKeySize(f"Key length must be at least {MIN_KEY_SIZE} bits")

        self._key_size = key_size
        self._random_source = random_source
        logger.debug("%s generator set to key size %d bits", self._algorithm_name, key_size)

    def generate(self) -> SecretKey:
        if self._random_source is None:
            logger.debug("%s generator creating default random source", self._algorithm_name)
            self._random_source = SystemRandomSource()

        # Partial final byte is kept as drawn, high bits are not masked
        key_bytes = self._random_source.fill((self._key_size + 7) >> 3)
        logger.debug("%s generator produced a %d bit key", self._algorithm_name, self._key_size)
        return SecretKey(self._algorithm_name, key_bytes)
