import logging
from django.dispatch import receiver
from corsheaders.signals import check_request_enabled

from .cors import OriginDecision, evaluate_origin, is_enforcing

logger = logging.getLogger(__name__)


@receiver(check_request_enabled)
def apply_origin_policy(sender, request, **kwargs):
    """
    Called by CorsMiddleware for origins that are not on its allow-list.

    Returning True makes the middleware reflect the origin. In log-only mode
    (the default) unlisted origins are reported and still permitted.
    """
    origin = request.headers.get('Origin')

    if evaluate_origin(origin) is OriginDecision.ALLOW:
        return True

    if is_enforcing():
        logger.warning(f"CORS: Blocked origin {origin}")
        return False

    logger.warning(f"CORS: Origin {origin} is not allow-listed, permitting (log-only mode)")
    return True
