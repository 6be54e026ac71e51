"""Access use cases."""

from menumaster.application.usecase.access.check_access import (
    CheckAccessRequest,
    CheckAccessResponse,
    CheckAccessUseCase,
)

__all__ = [
    "CheckAccessRequest",
    "CheckAccessResponse",
    "CheckAccessUseCase",
]
