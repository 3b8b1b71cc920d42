"""
URL configuration for the Task Board API.
"""
from django.conf import settings
from django.urls import path, re_path
from ninja import NinjaAPI

from apps.core.errors import register_exception_handlers
from apps.core.parsers import FormAwareParser

api = NinjaAPI(
    title=settings.APP_NAME,
    version=settings.API_VERSION,
    description=settings.APP_DESCRIPTION,
    docs_url="/api/docs",
    openapi_url="/api/openapi.json",
    parser=FormAwareParser(),
)

register_exception_handlers(api)

from apps.core.api import router as core_router
from apps.tasks.api import router as tasks_router
from apps.core.views import not_found

api.add_router("/api", core_router)
api.add_router("/api/tasks", tasks_router)

urlpatterns = [
    path('', api.urls),
    # Anything the API did not match
    re_path(r'^.*$', not_found),
]

handler404 = 'apps.core.views.not_found'
handler500 = 'apps.core.views.server_error'
