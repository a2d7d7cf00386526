"""
Short, URL-safe random identifiers.

Symbols are drawn from a cryptographically secure source and mapped onto
the alphabet by bit-mask rejection sampling, so every symbol is equally
likely. The default 21 character id carries about as much entropy as a
UUID v4 in a little over half the length.
"""

from nanoid_web.alphabets import (
    ALPHA_NUMERIC,
    ALPHA_ONLY,
    DEFAULT_ALPHABET,
    DEFAULT_SIZE,
    SHORT_SIZE,
)
from nanoid_web.random_source import EntropyError, RandomByteSource, SecureRandomSource
from nanoid_web.services.generator import format_string, generate_string
from nanoid_web.utils.ids import new_id, new_id_must, new_short_id, web_safe_id

__all__ = [
    "ALPHA_NUMERIC",
    "ALPHA_ONLY",
    "DEFAULT_ALPHABET",
    "DEFAULT_SIZE",
    "SHORT_SIZE",
    "EntropyError",
    "RandomByteSource",
    "SecureRandomSource",
    "format_string",
    "generate_string",
    "new_id",
    "new_id_must",
    "new_short_id",
    "web_safe_id",
]
