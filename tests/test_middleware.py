from blogify.middleware import MethodOverrideMiddleware


def _run(environ):
    seen = {}

    def inner(env, start_response):
        seen['method'] = env['REQUEST_METHOD']
        return []

    MethodOverrideMiddleware(inner)(environ, lambda *a: None)
    return seen['method']


def test_post_with_query_override():
    assert _run({'REQUEST_METHOD': 'POST', 'QUERY_STRING': '_method=patch'}) == 'PATCH'
    assert _run({'REQUEST_METHOD': 'POST', 'QUERY_STRING': '_method=DELETE'}) == 'DELETE'


def test_post_with_header_override():
    environ = {'REQUEST_METHOD': 'POST', 'QUERY_STRING': '', 'HTTP_X_HTTP_METHOD_OVERRIDE': 'PUT'}
    assert _run(environ) == 'PUT'


def test_only_post_is_overridden():
    assert _run({'REQUEST_METHOD': 'GET', 'QUERY_STRING': '_method=DELETE'}) == 'GET'


def test_unknown_override_is_ignored():
    assert _run({'REQUEST_METHOD': 'POST', 'QUERY_STRING': '_method=CONNECT'}) == 'POST'
    assert _run({'REQUEST_METHOD': 'POST'}) == 'POST'
