"""Pydantic schemas for task request/response validation."""

from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Literal, Optional

TaskCategory = Literal["study", "homework", "custom"]


class TaskCreate(BaseModel):
    # la validation métier (présence, catégorie custom) est faite par task_service
    text: Optional[str] = None
    category: Optional[str] = None
    custom_category_name: Optional[str] = Field(None, alias="customCategoryName")
    date: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class TaskUpdate(BaseModel):
    """Partial update: only the fields sent by the client are applied."""

    text: Optional[str] = None
    category: Optional[TaskCategory] = None
    custom_category_name: Optional[str] = Field(None, alias="customCategoryName")
    completed: Optional[bool] = None
    date: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class TaskResponse(BaseModel):
    id: int = Field(serialization_alias="_id")
    user_id: int = Field(serialization_alias="userId")
    text: str
    category: str
    custom_category_name: Optional[str] = Field(None, serialization_alias="customCategoryName")
    completed: bool
    date: str
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    model_config = ConfigDict(from_attributes=True)
