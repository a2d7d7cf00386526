"""
Random source dependency injection.

This module provides the factory that wires the configured random byte
source into the generators when the caller does not supply one.
"""
from nanoid_web.config import settings
from nanoid_web.random_source.base import RandomByteSource
from nanoid_web.random_source.secure import SecureRandomSource


def get_random_source() -> RandomByteSource:
    """
    Return the random byte source named by configuration.

    Returns:
        RandomByteSource instance

    Raises:
        ValueError: If NANOID_RANDOM_SOURCE is not supported
    """
    if settings.NANOID_RANDOM_SOURCE == "secure":
        return SecureRandomSource()

    raise ValueError(f"Unknown random source: {settings.NANOID_RANDOM_SOURCE}")
