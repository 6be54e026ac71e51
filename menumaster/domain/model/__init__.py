"""Domain model entities for MenuMaster."""

from menumaster.domain.model.invitation import Invitation
from menumaster.domain.model.user import User

__all__ = [
    "User",
    "Invitation",
]
