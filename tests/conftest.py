"""
Shared fixtures. Every test gets a fresh process-wide registry and settings.
"""
import pytest

from input_sanitizer.core.config import get_settings
from input_sanitizer.services.engine import Sanitizer
from input_sanitizer.services.registry import TransformRegistry, get_registry


@pytest.fixture(autouse=True)
def reset_globals():
    get_registry.cache_clear()
    get_settings.cache_clear()
    yield
    get_registry.cache_clear()
    get_settings.cache_clear()


@pytest.fixture
def registry():
    """A seeded registry private to the test."""
    return TransformRegistry()


@pytest.fixture
def sanitizer(registry):
    return Sanitizer(registry)
