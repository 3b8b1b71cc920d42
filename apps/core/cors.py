"""
Origin policy for cross-origin requests.

evaluate_origin() is a pure decision over the configured allow-list.
Whether a DENY actually blocks the request is decided separately by the
CORS_ENFORCE_ORIGINS setting (see signals.py).
"""
import re
from enum import Enum
from typing import Iterable, Optional

from django.conf import settings


class OriginDecision(str, Enum):
    ALLOW = 'ALLOW'
    DENY = 'DENY'


def evaluate_origin(
    origin: Optional[str],
    allowed_origins: Optional[Iterable[str]] = None,
    allowed_patterns: Optional[Iterable[str]] = None,
) -> OriginDecision:
    """
    Decide whether a declared origin is on the allow-list.

    Requests without an Origin header (curl, mobile apps, same-origin) are
    always allowed. Patterns are matched with re.match, the same way
    django-cors-headers applies CORS_ALLOWED_ORIGIN_REGEXES.
    """
    if not origin:
        return OriginDecision.ALLOW

    if allowed_origins is None:
        allowed_origins = getattr(settings, 'CORS_ALLOWED_ORIGINS', [])
    if allowed_patterns is None:
        allowed_patterns = getattr(settings, 'CORS_ALLOWED_ORIGIN_REGEXES', [])

    if origin in allowed_origins:
        return OriginDecision.ALLOW

    if any(re.match(pattern, origin) for pattern in allowed_patterns):
        return OriginDecision.ALLOW

    return OriginDecision.DENY


def is_enforcing() -> bool:
    return bool(getattr(settings, 'CORS_ENFORCE_ORIGINS', False))
