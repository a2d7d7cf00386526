import pytest

from nanoid_web.config import settings
from tests.fakes import FailingRandomSource


@pytest.fixture
def failing_source():
    """Source that fails on its first request."""
    return FailingRandomSource()


@pytest.fixture
def restore_settings():
    """Restore any settings a test overrides."""
    original = settings.model_dump()
    yield settings
    for key, value in original.items():
        setattr(settings, key, value)
