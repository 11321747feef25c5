"""keysmith - symmetric secret key generation for multiple algorithms."""

__version__ = "0.1.0"
__description__ = "Symmetric secret key generation for multiple algorithms"

from .core.binding import AlgorithmBinding
from .core.generator import KeyGeneratorConfig, KeyGeneratorCore
from .core.keys import SecretKey
from .core.registry import ProviderRegistry
from .algorithms import default_registry

__all__ = [
    "AlgorithmBinding",
    "KeyGeneratorConfig",
    "KeyGeneratorCore",
    "SecretKey",
    "ProviderRegistry",
    "default_registry",
]
