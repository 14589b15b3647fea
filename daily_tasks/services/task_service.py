"""Task service"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from daily_tasks.core.errors import Forbidden, NotFound, ValidationError
from daily_tasks.models.task import CATEGORIES, Task

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("text", "category", "custom_category_name", "completed", "date")
NON_NULLABLE_FIELDS = ("text", "category", "completed", "date")


def create_task(
    db: Session,
    owner_id: int,
    text: Optional[str],
    category: Optional[str],
    date: Optional[str],
    custom_category_name: Optional[str] = None,
) -> Task:
    text = (text or "").strip()
    custom_category_name = (custom_category_name or "").strip()

    if not text or not category or not date:
        raise ValidationError("Please provide task text, category, and date.")
    if category not in CATEGORIES:
        raise ValidationError(f"Category must be one of: {', '.join(CATEGORIES)}.")
    if category == "custom" and not custom_category_name:
        raise ValidationError("Custom category name is required for custom tasks.")

    task = Task(
        user_id=owner_id,
        text=text,
        category=category,
        custom_category_name=custom_category_name if category == "custom" else None,
        date=date,
    )
    db.add(task)
    db.commit()
    db.refresh(task)
    return task


def list_tasks_for_date(db: Session, owner_id: int, date: Optional[str]) -> List[Task]:
    if not date:
        raise ValidationError("Date query parameter is required.")

    return db.query(Task).filter(
        Task.user_id == owner_id,
        Task.date == date
    ).order_by(Task.created_at.asc(), Task.id.asc()).all()


def get_owned_task(db: Session, owner_id: int, task_id: int, action: str = "access") -> Task:
    task = db.query(Task).filter(Task.id == task_id).first()
    if not task:
        raise NotFound("Task not found.")

    if task.user_id != owner_id:
        logger.warning("User id=%s tried to %s task id=%s", owner_id, action, task_id)
        raise Forbidden(f"Not authorized to {action} this task.")

    return task


def update_task(db: Session, owner_id: int, task_id: int, fields: Dict[str, Any]) -> Task:
    """Applique seulement les champs fournis.

    L'invariant "custom => customCategoryName" n'est pas re-vérifié ici.
    """
    task = get_owned_task(db, owner_id, task_id, action="update")

    changes = {}
    for field, value in fields.items():
        if field not in UPDATABLE_FIELDS:
            continue
        if value is None and field in NON_NULLABLE_FIELDS:
            continue
        if isinstance(value, str):
            value = value.strip()
            if not value and field in NON_NULLABLE_FIELDS:
                raise ValidationError(f"Task {field} cannot be empty.")
        changes[field] = value

    # rien n'est appliqué si un des champs est invalide
    for field, value in changes.items():
        setattr(task, field, value)

    db.commit()
    db.refresh(task)
    return task


def delete_task(db: Session, owner_id: int, task_id: int) -> None:
    task = get_owned_task(db, owner_id, task_id, action="delete")
    db.delete(task)
    db.commit()
