"""Sign-up, login and session routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from typing import Optional

from api.dependencies import get_current_session, get_db, get_settings
from api.responses import error_responses
from app.config import Settings
from app.exceptions import UnauthorizedError
from domain.schemas.auth_schemas import (
    LoginRequest,
    SessionUser,
    SignupRequest,
    TokenResponse,
    UserResponse,
)
from services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])
logger = logging.getLogger("foodorder.api.auth")


@router.post(
    "/signup",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses=error_responses(409),
)
def signup(
    payload: SignupRequest,
    settings: Settings = Depends(get_settings),
    db: Session = Depends(get_db),
):
    """Create a user account."""
    user = AuthService.register_user(
        db,
        full_name=payload.full_name,
        email=payload.email,
        password=payload.password,
        rounds=settings.bcrypt_rounds,
    )
    return UserResponse.model_validate(user)


@router.post("/login", response_model=TokenResponse, responses=error_responses(401))
def login(
    payload: LoginRequest,
    settings: Settings = Depends(get_settings),
    db: Session = Depends(get_db),
):
    """Exchange an email and password for a bearer session token."""
    user = AuthService.verify_credentials(db, payload.email, payload.password)
    if user is None:
        raise UnauthorizedError("Invalid email or password")

    token, expires_at = AuthService.issue_token(user, settings)
    return TokenResponse(
        access_token=token,
        expires_at=expires_at,
        user=SessionUser(user_id=user.user_id, email=user.email, name=user.full_name),
    )


@router.get("/session", response_model=SessionUser, responses=error_responses(401))
def current_session(session: Optional[SessionUser] = Depends(get_current_session)):
    """Return the identity carried by the presented session token."""
    if session is None:
        raise UnauthorizedError("Not logged in")
    return session
