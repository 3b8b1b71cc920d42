"""
API-wide error responses.

Every failure a client sees is a JSON body with an `error` key:
- ValidationError     -> 400 {"error": "Validation Error", "details": [...]}
- HttpError           -> its status, {"error": <message>}
- Http404             -> 404 {"error": "Not Found"}
- StorageUnavailable  -> 500 {"error": "Internal Server Error", "message": ...}
- anything else       -> 500 {"error": "Internal Server Error", "message": ...}
"""
import logging
from django.http import Http404
from ninja import NinjaAPI
from ninja.errors import HttpError, ValidationError

from apps.tasks.store import StorageUnavailable

logger = logging.getLogger(__name__)


def register_exception_handlers(api: NinjaAPI) -> None:
    """Replace Ninja's default `detail` responses with the `error` shape."""

    def on_validation_error(request, exc: ValidationError):
        details = [
            {
                "loc": [str(part) for part in error.get("loc", ())],
                "msg": str(error.get("msg", "")),
                "type": str(error.get("type", "")),
            }
            for error in exc.errors
        ]
        return api.create_response(
            request,
            {"error": "Validation Error", "details": details},
            status=400,
        )

    def on_http_error(request, exc: HttpError):
        return api.create_response(request, {"error": str(exc)}, status=exc.status_code)

    def on_not_found(request, exc: Http404):
        return api.create_response(request, {"error": "Not Found"}, status=404)

    def on_storage_unavailable(request, exc: StorageUnavailable):
        logger.error(f"Storage unavailable during {request.method} {request.path}: {exc}")
        return api.create_response(
            request,
            {"error": "Internal Server Error", "message": f"Storage unavailable: {exc}"},
            status=500,
        )

    def on_unhandled(request, exc: Exception):
        logger.exception(f"Unhandled error during {request.method} {request.path}")
        return api.create_response(
            request,
            {"error": "Internal Server Error", "message": str(exc)},
            status=500,
        )

    api.add_exception_handler(ValidationError, on_validation_error)
    api.add_exception_handler(HttpError, on_http_error)
    api.add_exception_handler(Http404, on_not_found)
    api.add_exception_handler(StorageUnavailable, on_storage_unavailable)
    api.add_exception_handler(Exception, on_unhandled)
