"""
Django settings for the Task Board API.

All deployment-specific values come from environment variables so the same
image runs locally and on a container host.
"""
import os
from pathlib import Path

from .database import get_database_config


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_list(name: str) -> list:
    return [item.strip() for item in os.getenv(name, '').split(',') if item.strip()]


BASE_DIR = Path(__file__).resolve().parent.parent

# =============================================================================
# Core
# =============================================================================

APP_NAME = 'Task Board API'
APP_DESCRIPTION = 'Task board CRUD service with readiness-gated startup'
API_VERSION = '2.0.0'

APP_ENV = os.getenv('APP_ENV') or os.getenv('NODE_ENV') or 'development'

SECRET_KEY = os.getenv('SECRET_KEY', 'django-insecure-taskboard-development-key')

DEBUG = _env_bool('DEBUG', APP_ENV != 'production')

ALLOWED_HOSTS = _env_list('ALLOWED_HOSTS') or ['*']

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'django.contrib.staticfiles',
    'corsheaders',
    'ninja',
    'apps.core',
    'apps.tasks',
]

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'apps.core.middleware.RequestLogMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'config.urls'

# Trailing slashes are not part of the public routes
APPEND_SLASH = False

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
            ],
        },
    },
]

ASGI_APPLICATION = 'config.asgi.application'

# =============================================================================
# Database
# =============================================================================

DATABASES = {
    'default': get_database_config(BASE_DIR),
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

USE_TZ = True
TIME_ZONE = 'UTC'

STATIC_URL = 'static/'

# =============================================================================
# Task storage
# =============================================================================

# 'django' (ORM), 'memory' (in-process) or a dotted path to a TaskStoreInterface
TASK_STORE = os.getenv('TASK_STORE', 'django')

# =============================================================================
# Listener / startup
# =============================================================================

HOST = os.getenv('HOST', '0.0.0.0')
PORT = int(os.getenv('PORT', '3000'))
STARTUP_RETRY_DELAY = float(os.getenv('STARTUP_RETRY_DELAY', '5'))

# =============================================================================
# CORS
# =============================================================================

CORS_ALLOWED_ORIGINS = [
    'http://localhost:3000',
    'http://localhost:8080',
    'http://localhost:5500',  # VS Code Live Server
    'http://127.0.0.1:5500',
] + _env_list('CORS_EXTRA_ORIGINS')

# Any railway.app subdomain
CORS_ALLOWED_ORIGIN_REGEXES = [
    r'^.*\.railway\.app$',
]

CORS_ALLOW_CREDENTIALS = True
CORS_ALLOW_METHODS = ['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS']
CORS_ALLOW_HEADERS = ['content-type', 'authorization']

# False: mismatched origins are logged and still allowed
CORS_ENFORCE_ORIGINS = _env_bool('CORS_ENFORCE_ORIGINS', False)

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        },
        'plain': {
            'format': '%(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
        },
        'access': {
            'class': 'logging.StreamHandler',
            'formatter': 'plain',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'taskboard.requests': {
            'handlers': ['access'],
            'level': 'INFO',
            'propagate': False,
        },
        'django.request': {
            # Error responses are already logged by RequestLogMiddleware
            'handlers': ['console'],
            'level': 'CRITICAL',
            'propagate': False,
        },
    },
}
