"""
Service endpoints: health check and API description.
"""
from dataclasses import asdict
from django.conf import settings
from django.http import HttpRequest
from django.utils import timezone
from ninja import Router

from apps.tasks.store import get_task_store
from .schemas import HealthOut

router = Router(tags=["Service"])


@router.get("/health", response={200: HealthOut, 503: HealthOut}, exclude_none=True)
def health_api(request: HttpRequest):
    """
    Probe the task store.

    Returns 200 when the database answers, 503 otherwise. The body has the
    same shape either way.
    """
    db_health = get_task_store().health_check()
    healthy = db_health.is_healthy

    return (200 if healthy else 503), {
        "status": "healthy" if healthy else "unhealthy",
        "timestamp": timezone.now(),
        "version": settings.API_VERSION,
        "environment": settings.APP_ENV,
        "database": asdict(db_health),
    }


@router.get("")
def api_info(request: HttpRequest):
    """Static description of the service and its endpoints."""
    return {
        "name": settings.APP_NAME,
        "version": settings.API_VERSION,
        "description": settings.APP_DESCRIPTION,
        "endpoints": {
            "health": "GET /api/health",
            "tasks": {
                "list": "GET /api/tasks",
                "get": "GET /api/tasks/:id",
                "create": "POST /api/tasks",
                "update": "PUT /api/tasks/:id",
                "delete": "DELETE /api/tasks/:id",
                "stats": "GET /api/tasks/stats",
            },
        },
    }
