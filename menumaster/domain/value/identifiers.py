"""Strongly typed identifiers for MenuMaster domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
InvitationId = NewType("InvitationId", UUID)
