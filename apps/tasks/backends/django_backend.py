"""
Django ORM Task Store - the production backend.

Runs against DATABASES['default']: PostgreSQL when DATABASE_URL or DB_HOST
is set, SQLite otherwise.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from django.db import DatabaseError, connection
from django.db.models import Count

from config.database import describe_database
from apps.tasks.dtos import TaskDTO, TaskStatsDTO, HealthStatus
from apps.tasks.models import Task, TaskStatus, TaskPriority
from apps.tasks.store import TaskStoreInterface, StorageUnavailable

logger = logging.getLogger(__name__)


@contextmanager
def _storage_errors(operation: str):
    try:
        yield
    except DatabaseError as e:
        logger.error(f"[DB] {operation} failed: {e}")
        raise StorageUnavailable(str(e)) from e


class DjangoTaskStore(TaskStoreInterface):
    """Task persistence through the Django ORM."""

    def health_check(self) -> HealthStatus:
        database = describe_database(connection.settings_dict)
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
                cursor.fetchone()
        except Exception as e:
            logger.warning(f"[DB] Health check failed for {database}: {e}")
            return HealthStatus.unhealthy(database, str(e))

        return HealthStatus.healthy(database)

    def list_tasks(
        self,
        status: Optional[str] = None,
        priority: Optional[str] = None,
    ) -> List[TaskDTO]:
        queryset = Task.objects.all()

        if status:
            queryset = queryset.filter(status=status)
        if priority:
            queryset = queryset.filter(priority=priority)

        with _storage_errors("list_tasks"):
            return [TaskDTO.from_model(task) for task in queryset]

    def get_task(self, task_id: int) -> Optional[TaskDTO]:
        with _storage_errors("get_task"):
            try:
                return TaskDTO.from_model(Task.objects.get(pk=task_id))
            except Task.DoesNotExist:
                return None

    def create_task(self, data: Dict[str, Any]) -> TaskDTO:
        with _storage_errors("create_task"):
            task = Task.objects.create(**data)
            return TaskDTO.from_model(task)

    def update_task(self, task_id: int, changes: Dict[str, Any]) -> Optional[TaskDTO]:
        with _storage_errors("update_task"):
            try:
                task = Task.objects.get(pk=task_id)
            except Task.DoesNotExist:
                return None

            for attr, value in changes.items():
                setattr(task, attr, value)
            task.save()
            return TaskDTO.from_model(task)

    def delete_task(self, task_id: int) -> bool:
        with _storage_errors("delete_task"):
            deleted, _ = Task.objects.filter(pk=task_id).delete()
            return deleted > 0

    def task_stats(self) -> TaskStatsDTO:
        by_status = {choice: 0 for choice in TaskStatus.values}
        by_priority = {choice: 0 for choice in TaskPriority.values}

        with _storage_errors("task_stats"):
            for row in Task.objects.values('status').annotate(count=Count('id')).order_by():
                by_status[row['status']] = row['count']
            for row in Task.objects.values('priority').annotate(count=Count('id')).order_by():
                by_priority[row['priority']] = row['count']

        return TaskStatsDTO(
            total=sum(by_status.values()),
            by_status=by_status,
            by_priority=by_priority,
        )
