from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional


@dataclass(frozen=True)
class TaskDTO:
    """Data Transfer Object for Task - what every store backend returns."""
    id: int
    title: str
    description: str
    status: str
    priority: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, task) -> "TaskDTO":
        return cls(
            id=task.pk,
            title=task.title,
            description=task.description,
            status=str(task.status),
            priority=str(task.priority),
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


@dataclass(frozen=True)
class TaskStatsDTO:
    total: int
    by_status: Dict[str, int] = field(default_factory=dict)
    by_priority: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class HealthStatus:
    """
    Result of a single storage probe.
    Produced fresh on every call; never persisted.
    """
    status: str
    database: str
    error: Optional[str] = None

    HEALTHY = 'healthy'
    UNHEALTHY = 'unhealthy'

    @classmethod
    def healthy(cls, database: str) -> "HealthStatus":
        return cls(status=cls.HEALTHY, database=database)

    @classmethod
    def unhealthy(cls, database: str, error: str) -> "HealthStatus":
        return cls(status=cls.UNHEALTHY, database=database, error=error)

    @property
    def is_healthy(self) -> bool:
        return self.status == self.HEALTHY
