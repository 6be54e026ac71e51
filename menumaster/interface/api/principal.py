"""Resolve the authenticated principal from the session cookie."""

from uuid import UUID

from fastapi import HTTPException, status

from menumaster.domain.service import JWTService
from menumaster.util.jwt import JWTError


def require_principal(jwt_service: JWTService, auth_token: str | None) -> str:
    """Return the user id carried by the ``auth_token`` cookie.

    Args:
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie

    Returns:
        User ID claim of the token

    Raises:
        HTTPException: 401 if the cookie is missing or the token is invalid
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        payload = jwt_service.verify_token(auth_token)
        UUID(payload.user_id)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token subject",
        )

    return payload.user_id
