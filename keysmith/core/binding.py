from functools import partial
from typing import Any, Callable, Optional

from .generator import KeyGeneratorConfig, KeyGeneratorCore
from .keys import SecretKey
from .sources import RandomSource


class AlgorithmBinding:
    """Key generator for a single algorithm.

    Wraps its own KeyGeneratorCore and checks requested key sizes against
    the algorithm's rule before the core sees them.
    """

    def __init__(self, config: KeyGeneratorConfig):
        self.config = config
        self._core = KeyGeneratorCore(config.algorithm_name, config.default_key_size)

    @property
    def algorithm(self) -> str:
        return self.config.algorithm_name

    @property
    def key_size(self) -> int:
        return self._core.key_size

    @property
    def random_source(self) -> Optional[RandomSource]:
        return self._core.random_source

    def init(self, random_source: Optional[RandomSource] = None) -> None:
        self._core.reset_to_default(random_source)

    def init_with_parameters(self, params: Any, random_source: Optional[RandomSource] = None) -> None:
        self._core.reset_with_parameters(params, random_source)

    def init_with_size(self, key_size: int, random_source: Optional[RandomSource] = None) -> None:
        # Algorithm rule first; the core is left untouched when it fails
        self.config.check_key_size(key_size)
        self._core.reset_with_size(key_size, random_source)

    def generate_key(self) -> SecretKey:
        return self._core.generate()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.algorithm!r}, key_size={self.key_size})"


def binding_factory(config: KeyGeneratorConfig) -> Callable[[], AlgorithmBinding]:
    """Return a zero-argument constructor for bindings of ``config``."""
    return partial(AlgorithmBinding, config)
