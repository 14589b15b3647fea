import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from daily_tasks.core.config import settings
from daily_tasks.core.errors import InvalidToken

logger = logging.getLogger(__name__)


def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    # token signé, valable 30 jours par défaut, pas de révocation
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(days=settings.JWT_EXPIRE_DAYS)
    payload = {
        "user_id": user_id,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> int:
    """Vérifie la signature et l'expiration, retourne l'id du user embarqué."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        logger.info("Token rejected: %s", e)
        raise InvalidToken() from e

    user_id = payload.get("user_id")
    if not isinstance(user_id, int):
        raise InvalidToken()
    return user_id
