"""
TaskStore - Abstraction layer over task persistence.

Handlers never talk to the ORM directly; they ask get_task_store() for the
configured backend. The backend is chosen by the TASK_STORE setting.

Usage:
    from apps.tasks.store import get_task_store

    store = get_task_store()
    task = store.create_task({"title": "Buy milk"})

Environment Configuration:
    TASK_STORE=django   # Django ORM over DATABASES['default'] (default)
    TASK_STORE=memory   # In-process dict (development, tests)
    TASK_STORE=path.to.CustomStore
"""

import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, Dict, List, Optional

from django.conf import settings
from django.utils.module_loading import import_string

from .dtos import TaskDTO, TaskStatsDTO, HealthStatus

logger = logging.getLogger(__name__)


STORE_BACKENDS = {
    'django': 'apps.tasks.backends.django_backend.DjangoTaskStore',
    'memory': 'apps.tasks.backends.memory_backend.MemoryTaskStore',
}


class StorageUnavailable(Exception):
    """Raised by a store when the backing database cannot serve a query."""


class TaskStoreInterface(ABC):
    """
    Abstract interface for task persistence.

    Implementations:
    - DjangoTaskStore: Django ORM (PostgreSQL in production, SQLite locally)
    - MemoryTaskStore: in-process dict for development and isolated tests

    Lookups by id return None (or False for delete) when the task does not
    exist. Query failures raise StorageUnavailable.
    """

    @abstractmethod
    def health_check(self) -> HealthStatus:
        """Probe the backing store. Never raises."""

    @abstractmethod
    def list_tasks(
        self,
        status: Optional[str] = None,
        priority: Optional[str] = None,
    ) -> List[TaskDTO]:
        """Return tasks newest first, optionally filtered."""

    @abstractmethod
    def get_task(self, task_id: int) -> Optional[TaskDTO]:
        pass

    @abstractmethod
    def create_task(self, data: Dict[str, Any]) -> TaskDTO:
        """
        Persist a new task.

        Args:
            data: validated field values (title required; description,
                status and priority fall back to model defaults)

        Returns:
            The stored task with its assigned id and timestamps
        """

    @abstractmethod
    def update_task(self, task_id: int, changes: Dict[str, Any]) -> Optional[TaskDTO]:
        """Apply only the given field changes."""

    @abstractmethod
    def delete_task(self, task_id: int) -> bool:
        pass

    @abstractmethod
    def task_stats(self) -> TaskStatsDTO:
        """Counts by status and priority; every choice is present."""


def get_task_store() -> TaskStoreInterface:
    """Get the configured task store based on the TASK_STORE setting."""
    backend = getattr(settings, 'TASK_STORE', 'django')
    return _load_store(STORE_BACKENDS.get(backend, backend))


@lru_cache(maxsize=None)
def _load_store(path: str) -> TaskStoreInterface:
    try:
        store_class = import_string(path)
    except ImportError as e:
        raise ValueError(f"Unknown TASK_STORE: {path}") from e

    logger.info(f"Using task store {path}")
    return store_class()
