"""
Named identifier shapes built on the symbol mapper.

Strict functions raise EntropyError to the caller. new_id_must and
web_safe_id never raise it: they log the failure and return what was
produced, which may be shorter than usual or empty.
"""
from nanoid_web.alphabets import (
    ALPHA_NUMERIC,
    ALPHA_ONLY,
    DEFAULT_ALPHABET,
    WEB_SAFE_GROUP_SIZE,
    WEB_SAFE_GROUPS,
    WEB_SAFE_SEPARATOR,
)
from nanoid_web.config import settings
from nanoid_web.dependencies.random_source import get_random_source
from nanoid_web.logging_config import setup_logging
from nanoid_web.random_source.base import RandomByteSource
from nanoid_web.random_source.exceptions import EntropyError
from nanoid_web.services.generator import generate_string

logger = setup_logging()


def _default_id_parts(size: int | None) -> list[tuple[str, int]]:
    """Return (alphabet, length) pieces of a default id: a letter, then the rest."""
    if size is None:
        size = settings.NANOID_DEFAULT_SIZE
    if size < 1:
        raise ValueError(f"ID size must be at least 1, got {size}")
    return [(ALPHA_ONLY, 1), (DEFAULT_ALPHABET, size - 1)]


def new_id(size: int | None = None, source: RandomByteSource | None = None) -> str:
    """
    Generate a default id whose first character is always a letter.

    Args:
        size: Total length (default from NANOID_DEFAULT_SIZE, 21)
        source: Random byte source (default from configuration)

    Returns:
        Identifier of exactly `size` characters

    Raises:
        EntropyError: If any part of the id could not be generated
    """
    source = source or get_random_source()
    return "".join(
        generate_string(alphabet, length, source)
        for alphabet, length in _default_id_parts(size)
    )


def new_id_must(size: int | None = None, source: RandomByteSource | None = None) -> str:
    """
    Generate a default id without ever raising EntropyError.

    For callers that cannot handle errors. A failed piece is logged and left
    out, so a lost first letter still yields the remaining characters, and
    only a total failure returns an empty string.
    """
    source = source or get_random_source()
    generated: list[str] = []
    for alphabet, length in _default_id_parts(size):
        try:
            generated.append(generate_string(alphabet, length, source))
        except EntropyError as e:
            logger.error(f"ERROR creating NanoID: {str(e)}", exc_info=True)

    return "".join(generated)


def new_short_id(source: RandomByteSource | None = None) -> str:
    """Generate a NANOID_SHORT_SIZE (14) character id from the default alphabet."""
    return generate_string(DEFAULT_ALPHABET, settings.NANOID_SHORT_SIZE, source)


def web_safe_id(source: RandomByteSource | None = None) -> str:
    """
    Generate an id that is safe to use as an HTML element id.

    Four dash-separated groups of four characters, e.g. "aB3x-Qr7k-Zz01-m9Pq".
    Each group starts with a letter and continues with letters or digits.

    A failed piece is logged and left out, so the result is only
    19 characters long when every draw succeeds.
    """
    source = source or get_random_source()
    groups = []
    for _ in range(WEB_SAFE_GROUPS):
        group = ""
        for alphabet, length in ((ALPHA_ONLY, 1), (ALPHA_NUMERIC, WEB_SAFE_GROUP_SIZE - 1)):
            try:
                group += generate_string(alphabet, length, source)
            except EntropyError as e:
                logger.error(f"ERROR creating NanoID: {str(e)}", exc_info=True)
        groups.append(group)

    return WEB_SAFE_SEPARATOR.join(groups)
