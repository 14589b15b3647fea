from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from daily_tasks.core.database import get_db
from daily_tasks.core.deps import get_current_user
from daily_tasks.models.user import User
from daily_tasks.schemas.task import TaskCreate, TaskUpdate, TaskResponse
from daily_tasks.schemas.user import MessageResponse
from daily_tasks.services import task_service

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task_data: TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return task_service.create_task(
        db,
        owner_id=current_user.id,
        text=task_data.text,
        category=task_data.category,
        date=task_data.date,
        custom_category_name=task_data.custom_category_name,
    )


@router.get("", response_model=List[TaskResponse])
def list_tasks(
    date: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    # ex: /api/tasks?date=2025-07-25
    return task_service.list_tasks_for_date(db, current_user.id, date)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: int,
    task_data: TaskUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    update_data = task_data.model_dump(exclude_unset=True)
    return task_service.update_task(db, current_user.id, task_id, update_data)


@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    task_service.delete_task(db, current_user.id, task_id)
    return {"message": "Task removed successfully."}
