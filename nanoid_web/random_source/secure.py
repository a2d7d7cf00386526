"""
Operating system backed random source.
"""
import secrets

from nanoid_web.random_source.base import RandomByteSource
from nanoid_web.random_source.exceptions import EntropyError


class SecureRandomSource(RandomByteSource):
    """
    Random bytes from the operating system CSPRNG via the secrets module.

    Holds no state, so one instance can be shared between threads.
    """

    def generate(self, size: int) -> bytes:
        try:
            buffer = secrets.token_bytes(size)
        except (OSError, NotImplementedError) as e:
            raise EntropyError(size, str(e)) from e

        if len(buffer) != size:
            raise EntropyError(size, f"source returned {len(buffer)} bytes")

        return buffer
