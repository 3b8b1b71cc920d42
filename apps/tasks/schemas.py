"""
API Schemas for Tasks app.
Pydantic/Ninja schemas for request/response validation.
"""
from typing import Dict, Optional
from datetime import datetime
from ninja import Schema
from pydantic import Field, field_validator

from .models import TaskStatus, TaskPriority


# =============================================================================
# Request Schemas
# =============================================================================

class TaskIn(Schema):
    """Schema for creating a task. Missing status defaults to TODO."""
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM

    @field_validator('title')
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be blank")
        return value


class TaskUpdateIn(Schema):
    """Schema for updating a task. Only supplied fields are changed."""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None

    @field_validator('title', 'description', 'status', 'priority')
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("field may not be null")
        return value

    @field_validator('title')
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be blank")
        return value


# =============================================================================
# Response Schemas
# =============================================================================

class TaskOut(Schema):
    id: int
    title: str
    description: str
    status: str
    priority: str
    created_at: datetime
    updated_at: datetime


class TaskStatsOut(Schema):
    total: int
    by_status: Dict[str, int]
    by_priority: Dict[str, int]
