"""In-memory repository implementations for testing."""

from .invitation import InMemoryInvitationRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryInvitationRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]
