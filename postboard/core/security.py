"""JWT credential signing and verification (stateless, demo secret)."""
import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from pydantic import ValidationError as PydanticValidationError

from postboard.core.config import Settings, get_settings
from postboard.schemas.auth import TokenClaims

logger = logging.getLogger(__name__)


def issue_token(
    user_id: int,
    settings: Settings | None = None,
    now: datetime | None = None,
) -> str:
    """Create a signed access token for the user, valid for 24 hours by default."""
    settings = settings or get_settings()
    issued_at = now or datetime.now(timezone.utc)
    expire = issued_at + timedelta(hours=settings.access_token_expire_hours)
    to_encode = {"userId": user_id, "iat": issued_at, "exp": expire}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_token(token: str, settings: Settings | None = None) -> TokenClaims | None:
    """Verify signature and expiry; return the claims or None."""
    settings = settings or get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
        return TokenClaims.model_validate(payload)
    except (JWTError, PydanticValidationError) as e:
        logger.debug(f"Token rejected: {e}")
        return None


def verify_token(token: str, settings: Settings | None = None) -> int | None:
    """Return user_id if the token is valid; None otherwise."""
    if not token:
        return None
    claims = decode_token(token, settings)
    return claims.user_id if claims else None
