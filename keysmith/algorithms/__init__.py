"""Built-in symmetric key generators."""

from typing import Tuple

from ..core.generator import KeyGeneratorConfig
from ..core.registry import ProviderRegistry

CHACHA20 = KeyGeneratorConfig(algorithm_name="ChaCha20", default_key_size=256, fixed_key_size=256)

# HMAC keys only carry the general minimum
HMAC_SHA224 = KeyGeneratorConfig(algorithm_name="HmacSHA224", default_key_size=224)
HMAC_SHA256 = KeyGeneratorConfig(algorithm_name="HmacSHA256", default_key_size=256)
HMAC_SHA384 = KeyGeneratorConfig(algorithm_name="HmacSHA384", default_key_size=384)
HMAC_SHA512 = KeyGeneratorConfig(algorithm_name="HmacSHA512", default_key_size=512)

RC2 = KeyGeneratorConfig(algorithm_name="RC2", default_key_size=128, min_key_size=40, max_key_size=1024)
ARCFOUR = KeyGeneratorConfig(
    algorithm_name="ARCFOUR",
    default_key_size=128,
    min_key_size=40,
    max_key_size=1024,
    aliases=("RC4",),
)

BUILTIN_ALGORITHMS: Tuple[KeyGeneratorConfig, ...] = (
    CHACHA20,
    HMAC_SHA224,
    HMAC_SHA256,
    HMAC_SHA384,
    HMAC_SHA512,
    RC2,
    ARCFOUR,
)


def default_registry() -> ProviderRegistry:
    """Build a registry holding every built-in algorithm."""
    registry = ProviderRegistry()
    for config in BUILTIN_ALGORITHMS:
        registry.register(config)
    return registry


__all__ = [
    "CHACHA20",
    "HMAC_SHA224",
    "HMAC_SHA256",
    "HMAC_SHA384",
    "HMAC_SHA512",
    "RC2",
    "ARCFOUR",
    "BUILTIN_ALGORITHMS",
    "default_registry",
]
