"""Admin login endpoint (public)."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from flore.application.schemas import LoginRequest, TokenResponse
from flore.application.services import AuthService
from flore.domain.exceptions import InvalidCredential
from flore.infrastructure.dependencies import get_auth_service

router = APIRouter(prefix="/admin", tags=["Auth"])


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={status.HTTP_401_UNAUTHORIZED: {"description": "Wrong password"}},
)
async def login(
    data: LoginRequest,
    auth: AuthService = Depends(get_auth_service),
):
    """Exchange the admin password for an 8-hour access token."""
    try:
        token = await auth.login(data.password)
    except InvalidCredential as e:
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"error": str(e)})
    return TokenResponse(token=token)
