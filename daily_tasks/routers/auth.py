from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from daily_tasks.core.database import get_db
from daily_tasks.core.security import create_access_token
from daily_tasks.schemas.user import RegisterRequest, LoginRequest, LoginResponse, MessageResponse
from daily_tasks.services.user_service import register_user, verify_credentials

router = APIRouter(prefix="/api/auth", tags=["auth"])

@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: RegisterRequest, db: Session = Depends(get_db)):
    """Créer un nouvel utilisateur"""
    register_user(
        db,
        username=user_data.username,
        email=user_data.email,
        full_name=user_data.full_name,
        password=user_data.password,
        mobile_number=user_data.mobile_number,
    )
    return {"message": "User registered successfully!"}

@router.post("/login", response_model=LoginResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Se connecter et recevoir le token"""
    user = verify_credentials(db, credentials.username, credentials.password)

    return {
        "message": "Logged in successfully",
        "id": user.id,
        "username": user.username,
        "token": create_access_token(user.id),
    }
