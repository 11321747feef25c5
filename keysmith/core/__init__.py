"""Core keysmith components - stable abstractions."""

from .binding import AlgorithmBinding, binding_factory
from .errors import InvalidKeySize, KeyGenerationError, UnknownAlgorithm, UnsupportedParameter
from .generator import MIN_KEY_SIZE, KeyGeneratorConfig, KeyGeneratorCore
from .keys import SecretKey
from .sources import RandomSource, SystemRandomSource
from .registry import ProviderRegistry

__all__ = [
    "AlgorithmBinding",
    "binding_factory",
    "InvalidKeySize",
    "KeyGenerationError",
    "UnknownAlgorithm",
    "UnsupportedParameter",
    "MIN_KEY_SIZE",
    "KeyGeneratorConfig",
    "KeyGeneratorCore",
    "SecretKey",
    "RandomSource",
    "SystemRandomSource",
    "ProviderRegistry",
]
