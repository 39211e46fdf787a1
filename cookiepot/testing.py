# -*- coding: utf-8 -*-
import sys
from io import BytesIO


def create_environ(path='/', host='localhost', url_scheme='http', **extra):
    """Return a minimal GET environ for `path` on `host`. `host` may carry
    a port; `extra` is merged in last, so it can override any key."""
    server_name, _, port = host.partition(':')
    if not port:
        port = '443' if url_scheme == 'https' else '80'
    environ = {
        'REQUEST_METHOD': 'GET',
        'SCRIPT_NAME': '',
        'PATH_INFO': path,
        'QUERY_STRING': '',
        'SERVER_NAME': server_name,
        'SERVER_PORT': port,
        'HTTP_HOST': host,
        'SERVER_PROTOCOL': 'HTTP/1.1',
        'wsgi.version': (1, 0),
        'wsgi.url_scheme': url_scheme,
        'wsgi.input': BytesIO(),
        'wsgi.errors': sys.stderr,
    }
    environ.update(extra)
    return environ


def run_wsgi_app(app, environ):
    """Call `app` and return a ``(body, status, headers)`` tuple."""
    response = []

    def start_response(status, headers, exc_info=None):
        if exc_info is not None:
            raise exc_info[1].with_traceback(exc_info[2])
        response[:] = [status, headers]

    app_rv = app(environ, start_response)
    return b''.join(app_rv), response[0], response[1]
