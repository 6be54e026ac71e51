"""Mock providers for testing."""

from .payment import MockStripeProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockStripeProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
