"""Task model"""

from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey
from datetime import datetime
from daily_tasks.core.database import Base

CATEGORIES = ("study", "homework", "custom")


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    text = Column(String, nullable=False)
    category = Column(String, nullable=False, default="study")
    custom_category_name = Column(String, nullable=True)
    completed = Column(Boolean, nullable=False, default=False)
    # jour de la tâche au format YYYY-MM-DD, pas de fuseau horaire
    date = Column(String(10), nullable=False, index=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
