"""
Abstract base class for random byte sources.

The symbol mapper only depends on this interface, so tests can substitute a
seeded or scripted source while production code uses the OS CSPRNG.
"""
from abc import ABC, abstractmethod


class RandomByteSource(ABC):
    """
    Abstract base class for random byte sources.

    Implementations must be safe to call from several threads at once and
    must not retry on failure; the caller decides what to do with an error.
    """

    @abstractmethod
    def generate(self, size: int) -> bytes:
        """
        Return a fresh buffer of random bytes.

        Args:
            size: Number of bytes to produce

        Returns:
            Exactly size random bytes

        Raises:
            EntropyError: If the underlying source fails or returns short
        """
        pass
