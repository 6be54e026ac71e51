"""Access gate routes.

Protected pages call these before doing anything; a denied principal is
sent to the payment page and the protected action never runs.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from fastapi.responses import RedirectResponse

from menumaster.application.usecase.access import (
    CheckAccessRequest,
    CheckAccessResponse,
    CheckAccessUseCase,
)
from menumaster.config import Settings
from menumaster.domain.service import JWTService
from menumaster.interface.api.principal import require_principal

router = APIRouter(prefix="/access", tags=["access"], route_class=DishkaRoute)


@router.get("", response_model=CheckAccessResponse)
async def check_access(
    use_case: FromDishka[CheckAccessUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CheckAccessResponse:
    """Ask the access gate about the current user.

    Returns:
        allowed, and for a denial the reason and the payment page URL
    """
    user_id = require_principal(jwt_service, auth_token)
    return await use_case.execute(CheckAccessRequest(user_id=user_id))


@router.get("/gate")
async def access_gate(
    use_case: FromDishka[CheckAccessUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
    auth_token: str | None = Cookie(default=None),
    next_path: str = Query(default="/", alias="next"),
) -> RedirectResponse:
    """Redirect to the requested page if allowed, else to the payment page.

    Args:
        next_path: Frontend path the user was heading to

    Raises:
        HTTPException: 400 if ``next`` is not a site-relative path
    """
    # Only site-relative paths, so the gate can't be used as an open redirect
    if not next_path.startswith("/") or next_path.startswith("//"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="next must be a site-relative path",
        )

    user_id = require_principal(jwt_service, auth_token)
    decision = await use_case.execute(CheckAccessRequest(user_id=user_id))

    if decision.allowed:
        target = f"{settings.api.frontend_url}{next_path}"
    else:
        target = decision.payment_url or settings.api.payment_url

    return RedirectResponse(url=target, status_code=status.HTTP_303_SEE_OTHER)
