import logging

from fastapi import APIRouter, Depends, Request

from authx import AuthX, AuthXConfig
from authx.exceptions import AuthXException
from core.config import settings
from schemas.auth import CurrentUser, MeOut
from services.auth_services import require_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user", tags=["user"])

_cookie_samesite = settings.JWT_COOKIE_SAMESITE.lower() if settings.JWT_COOKIE_SAMESITE else None
_cookie_domain = settings.JWT_COOKIE_DOMAIN or None

config = AuthXConfig(
    JWT_SECRET_KEY=settings.SECRET_KEY,
    JWT_ALGORITHM=settings.JWT_ALG,
    JWT_TOKEN_LOCATION=settings.JWT_TOKEN_LOCATION,
    JWT_ACCESS_COOKIE_NAME=settings.JWT_ACCESS_COOKIE_NAME,
    JWT_COOKIE_SAMESITE=_cookie_samesite or "lax",
    JWT_COOKIE_SECURE=settings.JWT_COOKIE_SECURE,
    JWT_COOKIE_DOMAIN=_cookie_domain,
    JWT_COOKIE_CSRF_PROTECT=settings.JWT_COOKIE_CSRF_PROTECT,
)

# Tokens are issued by the sign-in service sharing SECRET_KEY; this app only verifies them.
security = AuthX(config=config)


async def current_user(request: Request) -> CurrentUser | None:
    """Resolve the caller from the access token, or None when there is no valid one.

    Rejection is left to ``require_user`` inside each operation.
    """
    try:
        payload = await security.access_token_required(request)
    except AuthXException as exc:
        logger.debug(f"No valid access token: {exc.__class__.__name__}", extra={"path": request.url.path})
        return None

    if not payload.sub:
        return None
    return CurrentUser(id=str(payload.sub))


@router.get("/me", response_model=MeOut)
async def me(user: CurrentUser | None = Depends(current_user)):
    user = require_user(user)
    return MeOut(user_id=user.id)
