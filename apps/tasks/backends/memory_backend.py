"""
Memory Task Store - in-process storage for development.

No database required. Data lives as long as the process does.

Usage:
    Set TASK_STORE=memory in your environment.
"""

import itertools
import logging
import threading
from dataclasses import replace
from typing import Any, Dict, List, Optional

from django.utils import timezone

from apps.tasks.dtos import TaskDTO, TaskStatsDTO, HealthStatus
from apps.tasks.models import TaskStatus, TaskPriority
from apps.tasks.store import TaskStoreInterface

logger = logging.getLogger(__name__)


class MemoryTaskStore(TaskStoreInterface):
    """
    Keep tasks in a dict keyed by id.

    This is ideal for:
    - Local development without a database
    - Handler tests against a fresh, isolated store
    """

    def __init__(self):
        self._tasks: Dict[int, TaskDTO] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def health_check(self) -> HealthStatus:
        return HealthStatus.healthy("memory")

    def list_tasks(
        self,
        status: Optional[str] = None,
        priority: Optional[str] = None,
    ) -> List[TaskDTO]:
        with self._lock:
            tasks = list(self._tasks.values())

        if status:
            tasks = [t for t in tasks if t.status == status]
        if priority:
            tasks = [t for t in tasks if t.priority == priority]

        return sorted(tasks, key=lambda t: (t.created_at, t.id), reverse=True)

    def get_task(self, task_id: int) -> Optional[TaskDTO]:
        with self._lock:
            return self._tasks.get(task_id)

    def create_task(self, data: Dict[str, Any]) -> TaskDTO:
        now = timezone.now()
        with self._lock:
            task = TaskDTO(
                id=next(self._ids),
                title=data['title'],
                description=data.get('description', ''),
                status=TaskStatus(data.get('status', TaskStatus.TODO)).value,
                priority=TaskPriority(data.get('priority', TaskPriority.MEDIUM)).value,
                created_at=now,
                updated_at=now,
            )
            self._tasks[task.id] = task

        logger.debug(f"[MEMORY] Created task {task.id}")
        return task

    def update_task(self, task_id: int, changes: Dict[str, Any]) -> Optional[TaskDTO]:
        changes = dict(changes)
        if 'status' in changes:
            changes['status'] = TaskStatus(changes['status']).value
        if 'priority' in changes:
            changes['priority'] = TaskPriority(changes['priority']).value

        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return None
            task = replace(task, updated_at=timezone.now(), **changes)
            self._tasks[task_id] = task
            return task

    def delete_task(self, task_id: int) -> bool:
        with self._lock:
            return self._tasks.pop(task_id, None) is not None

    def task_stats(self) -> TaskStatsDTO:
        by_status = {choice: 0 for choice in TaskStatus.values}
        by_priority = {choice: 0 for choice in TaskPriority.values}

        with self._lock:
            for task in self._tasks.values():
                by_status[task.status] += 1
                by_priority[task.priority] += 1

        return TaskStatsDTO(
            total=sum(by_status.values()),
            by_status=by_status,
            by_priority=by_priority,
        )
