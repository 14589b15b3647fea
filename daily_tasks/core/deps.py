import logging
from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from daily_tasks.core.database import get_db
from daily_tasks.core.errors import InvalidToken, Unauthorized
from daily_tasks.core.security import verify_token
from daily_tasks.models.user import User
from daily_tasks.services.user_service import get_user

logger = logging.getLogger(__name__)


def get_current_user(
    db: Session = Depends(get_db),
    authorization: Optional[str] = Header(None)
) -> User:
    # Check token
    if not authorization or not authorization.startswith("Bearer "):
        raise Unauthorized("Not authorized, no token")

    token = authorization[len("Bearer "):].strip()
    if not token:
        raise Unauthorized("Not authorized, no token")

    try:
        user_id = verify_token(token)
    except InvalidToken:
        raise Unauthorized("Not authorized, token failed")

    user = get_user(db, user_id)
    if not user:
        logger.warning("Valid token for missing user id=%s", user_id)
        raise Unauthorized("Not authorized, user not found")

    return user
