"""Admin sign-in, sign-out and session lookup."""

from fastapi import APIRouter, Depends, HTTPException, status

from delfina_home.application.schemas import LoginRequest, SessionResponse
from delfina_home.application.services import AuthService
from delfina_home.domain.entities import AdminSession
from delfina_home.domain.exceptions import AuthenticationError
from delfina_home.infrastructure.dependencies import (
    get_auth_service,
    get_bearer_token,
    require_admin_session,
)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login", response_model=SessionResponse)
async def login(
    body: LoginRequest,
    auth: AuthService = Depends(get_auth_service),
) -> SessionResponse:
    """Exchange the admin credentials for a bearer token."""
    try:
        session = auth.sign_in_with_password(body.email, body.password)
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    return SessionResponse.model_validate(session, from_attributes=True)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    token: str | None = Depends(get_bearer_token),
    auth: AuthService = Depends(get_auth_service),
) -> None:
    if token:
        auth.sign_out(token)


@router.get("/session", response_model=SessionResponse)
async def current_session(
    session: AdminSession = Depends(require_admin_session),
) -> SessionResponse:
    return SessionResponse.model_validate(session, from_attributes=True)
