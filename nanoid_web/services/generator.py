"""
Unbiased mapping of random bytes onto an alphabet.

Bytes are masked down to the smallest power-of-two range covering the
alphabet, and values that still fall outside it are rejected rather than
wrapped with a modulo, which would favour the low indices.
"""
import math
from collections.abc import Sequence

from nanoid_web.dependencies.random_source import get_random_source
from nanoid_web.logging_config import setup_logging
from nanoid_web.random_source.base import RandomByteSource

logger = setup_logging()

# A masked byte can only address 256 symbols
MAX_ALPHABET_LENGTH = 256


def compute_mask(alphabet_length: int) -> int:
    """
    Return the smallest 2^k - 1 covering alphabet_length - 1.

    OR-ing with 1 keeps at least one bit for a single-symbol alphabet.
    """
    return (1 << ((alphabet_length - 1) | 1).bit_length()) - 1


def compute_step(mask: int, size: int, alphabet_length: int) -> int:
    """
    Return how many random bytes to request per batch.

    The 1.6 factor over-provisions for rejected bytes so a single batch
    almost always suffices.
    """
    return math.ceil(1.6 * (mask * size) / alphabet_length)


def format_string(source: RandomByteSource, alphabet: Sequence[str], size: int) -> str:
    """
    Build a random string of `size` symbols drawn from `alphabet`.

    Args:
        source: Random byte source to draw batches from
        alphabet: Symbols to choose from (1 to 256 of them)
        size: Number of symbols to produce

    Returns:
        String of exactly `size` symbols

    Raises:
        ValueError: If the alphabet is empty or too long, or size is negative
        EntropyError: If the random source fails (not retried)
    """
    alphabet_length = len(alphabet)
    if alphabet_length == 0:
        raise ValueError("Alphabet must contain at least one symbol")
    if alphabet_length > MAX_ALPHABET_LENGTH:
        raise ValueError(
            f"Alphabet has {alphabet_length} symbols, at most {MAX_ALPHABET_LENGTH} are supported"
        )
    if size < 0:
        raise ValueError(f"Size must be non-negative, got {size}")

    if size == 0:
        return ""

    mask = compute_mask(alphabet_length)
    step = compute_step(mask, size, alphabet_length)

    symbols: list[str] = []
    while True:
        random_buffer = source.generate(step)

        for byte in random_buffer:
            index = byte & mask
            if index < alphabet_length:
                symbols.append(alphabet[index])
                if len(symbols) == size:
                    return "".join(symbols)

        logger.debug(
            f"Batch of {step} bytes exhausted with {len(symbols)}/{size} symbols, requesting another"
        )


def generate_string(
    alphabet: Sequence[str],
    size: int,
    source: RandomByteSource | None = None,
) -> str:
    """Generate a random string from `alphabet`, using the configured source by default."""
    if source is None:
        source = get_random_source()
    return format_string(source, alphabet, size)
