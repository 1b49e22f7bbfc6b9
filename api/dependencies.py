"""
API dependencies for dependency injection
"""

from typing import Generator, Optional
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.config import Settings
from domain.schemas.auth_schemas import SessionUser
from services.auth_service import AuthService

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    """Settings the running application was created with"""
    return request.app.state.settings


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Sessions come from the storage handle built at application startup.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from request.app.state.database.session()


def get_current_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> Optional[SessionUser]:
    """
    Resolve the bearer token into a session identity.

    Returns None when no token is sent or the token does not verify; the
    service layer decides whether that is an error.
    """
    if credentials is None or not credentials.credentials:
        return None
    return AuthService.decode_token(credentials.credentials, settings)
