class KeyGenerationError(ValueError):
    """Base class for key generation failures."""


class InvalidKeySize(KeyGenerationError):
    pass


class UnsupportedParameter(KeyGenerationError):
    pass


class UnknownAlgorithm(KeyGenerationError):
    pass
