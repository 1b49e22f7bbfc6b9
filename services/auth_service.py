from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple
from sqlalchemy.orm import Session
import logging

import bcrypt
import jwt

from app.config import Settings
from domain.models import AppUser
from domain.schemas.auth_schemas import SessionUser
from repositories import UserRepository

logger = logging.getLogger("foodorder.auth")

# bcrypt only looks at the first 72 bytes of a password
_BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


class AuthService:
    """Credential verification and session token handling"""

    @staticmethod
    def hash_password(password: str, rounds: int = 12) -> str:
        salt = bcrypt.gensalt(rounds=rounds)
        return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")

    @staticmethod
    def check_password(password: str, password_hash: str) -> bool:
        """Compare a plaintext password with a stored bcrypt hash"""
        try:
            return bcrypt.checkpw(
                _password_bytes(password), password_hash.encode("utf-8")
            )
        except ValueError:
            logger.warning("Stored password hash is not a valid bcrypt hash")
            return False

    @staticmethod
    def register_user(
        db: Session, full_name: str, email: str, password: str, rounds: int = 12
    ) -> AppUser:
        """
        Create a user account with a hashed password.

        Raises:
            ConflictError: If the email is already registered
        """
        user_repo = UserRepository(db)
        password_hash = AuthService.hash_password(password, rounds=rounds)
        user = user_repo.create_user(
            email=email, password_hash=password_hash, full_name=full_name
        )
        logger.info(f"user_registered user_id={user.user_id}")
        return user

    @staticmethod
    def verify_credentials(db: Session, email: str, password: str) -> Optional[AppUser]:
        """
        Return the user matching the email/password pair, or None.

        An unknown email and a wrong password are indistinguishable to the caller.
        """
        if not email or not password:
            return None

        user = UserRepository(db).get_by_email(email)
        if user is None:
            logger.info("login_failed reason=unknown_email")
            return None

        if not AuthService.check_password(password, user.password_hash):
            logger.info(f"login_failed reason=bad_password user_id={user.user_id}")
            return None

        return user

    @staticmethod
    def issue_token(user: AppUser, settings: Settings) -> Tuple[str, datetime]:
        """Sign a session token for a verified user; returns (token, expires_at)"""
        now = datetime.now(timezone.utc)
        expires_at = now + timedelta(days=settings.session_max_age_days)
        payload = {
            "sub": user.user_id,
            "email": user.email,
            "name": user.full_name,
            "iat": now,
            "exp": expires_at,
        }
        token = jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)
        return token, expires_at

    @staticmethod
    def decode_token(token: str, settings: Settings) -> Optional[SessionUser]:
        """Return the session identity for a valid token, or None"""
        try:
            payload = jwt.decode(
                token,
                settings.jwt_secret,
                algorithms=[settings.jwt_algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            logger.info("session_rejected reason=expired")
            return None
        except jwt.PyJWTError as e:
            logger.info(f"session_rejected reason=invalid error={e}")
            return None

        return SessionUser(
            user_id=payload["sub"],
            email=payload.get("email", ""),
            name=payload.get("name"),
        )
