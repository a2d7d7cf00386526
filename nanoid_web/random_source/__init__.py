"""
Random byte sources for identifier generation.

This package defines the capability the symbol mapper draws from and the
production implementation backed by the operating system.
"""

from nanoid_web.random_source.base import RandomByteSource
from nanoid_web.random_source.secure import SecureRandomSource
from nanoid_web.random_source.exceptions import EntropyError

__all__ = [
    "RandomByteSource",
    "SecureRandomSource",
    "EntropyError",
]
