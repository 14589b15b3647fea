"""User service: registration and credential checks."""

import logging
from typing import Optional

import bcrypt
from email_validator import EmailNotValidError, validate_email
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from daily_tasks.core.config import settings
from daily_tasks.core.errors import Conflict, InvalidCredentials, ValidationError
from daily_tasks.models.user import User

logger = logging.getLogger(__name__)

USERNAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 6
# bcrypt refuse les mots de passe de plus de 72 octets
PASSWORD_MAX_BYTES = 72


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode(), salt).decode()


def set_password(user: User, password: str) -> None:
    # appelé explicitement avant chaque écriture d'un mot de passe
    user.password = hash_password(password)


def check_password(user: User, password: str) -> bool:
    return bcrypt.checkpw(password.encode(), user.password.encode())


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def register_user(
    db: Session,
    username: Optional[str],
    email: Optional[str],
    full_name: Optional[str],
    password: Optional[str],
    mobile_number: Optional[str] = None,
) -> User:
    username = (username or "").strip()
    email = (email or "").strip()
    full_name = (full_name or "").strip()
    if not username or not email or not full_name or not password:
        raise ValidationError("Please enter all required fields (username, email, full name, password).")

    if len(username) < USERNAME_MIN_LENGTH:
        raise ValidationError(f"Username must be at least {USERNAME_MIN_LENGTH} characters long.")
    if len(password) < PASSWORD_MIN_LENGTH:
        raise ValidationError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters long.")
    if len(password.encode()) > PASSWORD_MAX_BYTES:
        raise ValidationError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes long.")

    try:
        email = validate_email(email, check_deliverability=False).normalized.lower()
    except EmailNotValidError:
        raise ValidationError("Please enter a valid email address.")

    if db.query(User).filter(User.username == username).first():
        raise Conflict("Username already exists.")
    if db.query(User).filter(User.email == email).first():
        raise Conflict("Email already exists.")

    user = User(
        username=username,
        email=email,
        full_name=full_name,
        mobile_number=(mobile_number or "").strip() or None,
    )
    set_password(user, password)

    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # requête concurrente avec le même username/email
        db.rollback()
        raise Conflict("Username or email already exists.")
    db.refresh(user)

    logger.info("Registered user id=%s username=%s", user.id, user.username)
    return user


def verify_credentials(db: Session, username: str, password: str) -> User:
    """Même erreur générique pour un username inconnu et un mauvais mot de passe."""
    user = db.query(User).filter(User.username == (username or "").strip()).first()
    if (
        not user
        or not password
        or len(password.encode()) > PASSWORD_MAX_BYTES
        or not check_password(user, password)
    ):
        logger.info("Failed login for username=%s", username)
        raise InvalidCredentials()
    return user
