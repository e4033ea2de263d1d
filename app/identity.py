from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt

from app.config import settings
from app.errors import AuthError


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, as proven by a bearer token."""

    id: str
    name: str


def issue_token(user_id: str, display_name: str) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "name": display_name or "",
        "iat": now,
        "exp": now + timedelta(days=settings.access_token_expire_days),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str) -> Identity:
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.InvalidTokenError:
        raise AuthError.invalid()

    return Identity(id=str(payload["sub"]), name=payload.get("name", ""))
