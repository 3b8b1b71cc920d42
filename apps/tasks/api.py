"""
Task API endpoints.

Provides CRUD operations for board tasks plus aggregate stats.
All storage access goes through the configured TaskStore.
"""
import logging
from typing import List, Optional
from django.http import HttpRequest
from ninja import Router
from ninja.errors import HttpError

from .models import TaskStatus, TaskPriority
from .schemas import TaskIn, TaskUpdateIn, TaskOut, TaskStatsOut
from .store import get_task_store

logger = logging.getLogger(__name__)

router = Router(tags=["Tasks"])


@router.get("", response=List[TaskOut])
def list_tasks_api(
    request: HttpRequest,
    status: Optional[TaskStatus] = None,
    priority: Optional[TaskPriority] = None,
):
    """
    List all tasks, newest first.

    Query Parameters:
    - status: Filter by status (TODO, IN_PROGRESS, DONE)
    - priority: Filter by priority (LOW, MEDIUM, HIGH)
    """
    return get_task_store().list_tasks(
        status=status.value if status else None,
        priority=priority.value if priority else None,
    )


# Registered before /{task_id} so "stats" is never read as an id
@router.get("/stats", response=TaskStatsOut)
def task_stats_api(request: HttpRequest):
    """Task counts in total, by status and by priority."""
    return get_task_store().task_stats()


@router.get("/{int:task_id}", response=TaskOut)
def get_task_api(request: HttpRequest, task_id: int):
    task = get_task_store().get_task(task_id)
    if not task:
        raise HttpError(404, "Task not found")
    return task


@router.post("", response={201: TaskOut})
def create_task_api(request: HttpRequest, payload: TaskIn):
    """
    Create a new task.

    Only title is required; status defaults to TODO and priority to MEDIUM.
    """
    task = get_task_store().create_task(payload.model_dump())
    logger.info(f"Created task {task.id}")
    return 201, task


@router.put("/{int:task_id}", response=TaskOut)
def update_task_api(request: HttpRequest, task_id: int, payload: TaskUpdateIn):
    """
    Update an existing task.

    Fields left out of the body keep their current values.
    """
    task = get_task_store().update_task(task_id, payload.model_dump(exclude_unset=True))
    if not task:
        raise HttpError(404, "Task not found")
    logger.info(f"Updated task {task_id}")
    return task


@router.delete("/{int:task_id}", response={204: None})
def delete_task_api(request: HttpRequest, task_id: int):
    if not get_task_store().delete_task(task_id):
        raise HttpError(404, "Task not found")
    logger.info(f"Deleted task {task_id}")
    return 204, None
