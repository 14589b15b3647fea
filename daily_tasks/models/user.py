from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from daily_tasks.core.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False, index=True)
    email = Column(String, unique=True, nullable=False, index=True)
    full_name = Column(String, nullable=False)
    mobile_number = Column(String, nullable=True)
    # toujours un hash bcrypt, jamais le mot de passe en clair
    password = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
