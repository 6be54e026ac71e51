"""Repository interfaces for MenuMaster domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from menumaster.domain.repository.invitation import InvitationRepository
from menumaster.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "InvitationRepository",
]
