"""
ASGI config for the Task Board API.

Served by uvicorn through `python manage.py serve`, which waits for the
database before binding. Any other ASGI server can import `application`
directly.
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

from django.core.asgi import get_asgi_application

# Initialize Django application at module load time (container startup)
application = get_asgi_application()
