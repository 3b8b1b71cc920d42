"""
Request body parsing for the API.

JSON stays the default. HTML forms post `application/x-www-form-urlencoded`
(or `multipart/form-data`), so those bodies are read as form fields instead.
"""
from django.http import HttpRequest, QueryDict
from ninja.parser import Parser
from ninja.types import DictStrAny

FORM_CONTENT_TYPES = ('application/x-www-form-urlencoded', 'multipart/form-data')


class FormAwareParser(Parser):
    """JSON parser that also accepts form-encoded task payloads."""

    def parse_body(self, request: HttpRequest) -> DictStrAny:
        if request.content_type not in FORM_CONTENT_TYPES:
            return super().parse_body(request)

        if request.method == 'POST':
            data = request.POST
        elif request.content_type == 'application/x-www-form-urlencoded':
            # Django only populates request.POST for POST requests
            data = QueryDict(request.body, encoding=request.encoding)
        else:
            raise ValueError(f"multipart bodies are only accepted on POST, not {request.method}")

        return self.parse_querydict(data, [], request)
