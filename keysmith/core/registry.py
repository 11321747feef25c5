from typing import Callable, Dict, Iterator, List, Optional, Union

from .binding import AlgorithmBinding, binding_factory
from .errors import UnknownAlgorithm
from .generator import KeyGeneratorConfig

BindingFactory = Callable[[], AlgorithmBinding]


class ProviderRegistry:
    """Maps algorithm names to binding factories.

    Lookups are case-insensitive and resolve aliases. Names are listed in
    the order they were registered.
    """

    def __init__(self) -> None:
        self._factories: Dict[str, BindingFactory] = {}
        self._configs: Dict[str, KeyGeneratorConfig] = {}
        # lowercased name or alias -> canonical name
        self._lookup: Dict[str, str] = {}

    def register(self, config: Union[KeyGeneratorConfig, str],
                 factory: Optional[BindingFactory] = None) -> None:
        if isinstance(config, str):
            if factory is None:
                raise ValueError(f"A factory is required to register {config!r} by name")
            name, aliases = config, ()
        else:
            name, aliases = config.algorithm_name, config.aliases
            if factory is None:
                factory = binding_factory(config)

        if not callable(factory):
            raise ValueError(f"Factory for {name} must be callable")

        keys = [name.lower()] + [alias.lower() for alias in aliases]
        for key in keys:
            if key in self._lookup:
                raise ValueError(f"Algorithm already registered: {key}")

        self._factories[name] = factory
        if isinstance(config, KeyGeneratorConfig):
            self._configs[name] = config
        for key in keys:
            self._lookup[key] = name

    def _canonical(self, name: str) -> Optional[str]:
        return self._lookup.get(name.lower())

    def get_factory(self, name: str) -> Optional[BindingFactory]:
        canonical = self._canonical(name)
        if canonical is None:
            return None
        return self._factories[canonical]

    def describe(self, name: str) -> Optional[KeyGeneratorConfig]:
        canonical = self._canonical(name)
        if canonical is None:
            return None
        return self._configs.get(canonical)

    def list_algorithms(self) -> List[str]:
        return list(self._factories.keys())

    def create(self, name: str) -> AlgorithmBinding:
        factory = self.get_factory(name)
        if factory is None:
            raise UnknownAlgorithm(f"Unknown algorithm: {name}")
        return factory()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._canonical(name) is not None

    def __len__(self) -> int:
        return len(self._factories)

    def __iter__(self) -> Iterator[str]:
        return iter(self.list_algorithms())
