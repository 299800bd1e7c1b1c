"""Mock providers for testing."""

from .broadcast import MockBroadcastProvider
from .google import MockGoogleProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockBroadcastProvider",
    "MockGoogleProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
