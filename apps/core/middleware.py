import logging
from django.utils import timezone
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger('taskboard.requests')


class RequestLogMiddleware(MiddlewareMixin):
    """
    Logs one line per request in Apache "combined" format:

        remote - - [time] "METHOD path PROTOCOL" status length "referer" "user-agent"
    """

    def process_request(self, request):
        request.received_at = timezone.now()

    def process_response(self, request, response):
        received_at = getattr(request, 'received_at', None) or timezone.now()

        if response.streaming:
            length = '-'
        else:
            length = len(response.content)

        logger.info(
            '%s - - [%s] "%s %s %s" %s %s "%s" "%s"',
            request.META.get('REMOTE_ADDR', '-'),
            received_at.strftime('%d/%b/%Y:%H:%M:%S %z'),
            request.method,
            request.get_full_path(),
            request.META.get('SERVER_PROTOCOL', 'HTTP/1.1'),
            response.status_code,
            length,
            request.headers.get('Referer', '-'),
            request.headers.get('User-Agent', '-'),
        )
        return response
