"""
Plain Django views for requests that never reach the Ninja API.
"""
from django.http import JsonResponse


def not_found(request, *args, **kwargs):
    """Catch-all for unmatched paths."""
    return JsonResponse({'error': 'Not Found'}, status=404)


def server_error(request, *args, **kwargs):
    return JsonResponse(
        {'error': 'Internal Server Error', 'message': 'Unexpected server error'},
        status=500,
    )
