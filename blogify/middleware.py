"""
Method Override Middleware

HTML forms can only POST. A POST carrying ``?_method=PATCH`` (or the
``X-HTTP-Method-Override`` header) is dispatched as that method instead.
"""

from urllib.parse import parse_qs

OVERRIDABLE_METHODS = frozenset(['PATCH', 'PUT', 'DELETE'])


class MethodOverrideMiddleware:
    """WSGI middleware rewriting ``REQUEST_METHOD`` on overridden POSTs."""

    def __init__(self, wsgi_app, param='_method', header='HTTP_X_HTTP_METHOD_OVERRIDE'):
        self.wsgi_app = wsgi_app
        self.param = param
        self.header = header

    def __call__(self, environ, start_response):
        if environ.get('REQUEST_METHOD', '').upper() == 'POST':
            query = parse_qs(environ.get('QUERY_STRING', ''))
            method = (query.get(self.param) or [environ.get(self.header, '')])[0].upper()
            if method in OVERRIDABLE_METHODS:
                environ['REQUEST_METHOD'] = method
        return self.wsgi_app(environ, start_response)
