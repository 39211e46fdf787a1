# -*- coding: utf-8 -*-
import time
from datetime import date, datetime, timedelta
from http import HTTPStatus
from wsgiref.headers import Headers

from .cookie import (DELETE_MAX_AGE, valid_name, valid_domain, valid_path,
     deep_delete)
from ._internal import _log


def cookie_date(value):
    """ Format `value` as an RFC 1123 date for the ``Expires`` attribute.
        Accepts a date, a datetime, a UNIX timestamp or a struct_time;
        strings are returned untouched. """
    if isinstance(value, datetime):
        value = value.utctimetuple()
    elif isinstance(value, date):
        value = value.timetuple()
    elif isinstance(value, (int, float)):
        value = time.gmtime(value)
    if not isinstance(value, str):
        value = time.strftime("%a, %d %b %Y %H:%M:%S GMT", value)
    return value


def _valid_value_char(c):
    return 0x20 <= ord(c) < 0x7f and c not in '";\\'


class SetCookie(object):
    """ A single cookie directive, rendered as the value of one
        ``Set-Cookie`` header. Empty `domain` and `path` leave the
        attribute out, as does `None` for `max_age` and `expires`. """

    def __init__(self, name, value='', domain='', path='', max_age=None,
                 expires=None, secure=False, httponly=False):
        self.name = name
        self.value = value
        self.domain = domain
        self.path = path
        self.max_age = max_age
        self.expires = expires
        self.secure = secure
        self.httponly = httponly

    @property
    def key(self):
        """Browsers tell cookies apart by name, domain and path."""
        return (self.name, self.domain, self.path)

    def output(self):
        value = self.value
        if ' ' in value or ',' in value:
            value = '"%s"' % value
        parts = ['%s=%s' % (self.name, value)]
        if self.path:
            parts.append('Path=%s' % self.path)
        if self.domain:
            parts.append('Domain=%s' % self.domain)
        if self.expires is not None:
            parts.append('Expires=%s' % cookie_date(self.expires))
        if self.max_age is not None:
            parts.append('Max-Age=%d' % self.max_age)
        if self.httponly:
            parts.append('HttpOnly')
        if self.secure:
            parts.append('Secure')
        return '; '.join(parts)

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__, self.output())


class Response(object):
    """ A response body with a status, headers and the cookies to set.

        Args:
            body: a string, bytes or a list of them.
            status: Either an HTTP status code (e.g. 200) or a status line
                       including the reason phrase (e.g. '200 OK').
            headers: A dictionary or a list of name-value pairs.
    """

    default_status = 200
    default_content_type = 'text/plain; charset=UTF-8'

    #: cookie values above this size are refused, browsers drop them anyway
    max_cookie_size = 4096

    def __init__(self, body='', status=None, headers=None):
        if isinstance(headers, dict):
            headers = headers.items()
        self.headers = Headers(list(headers or []))
        self.status = status or self.default_status
        self.body = body
        self._cookies = {}

    @property
    def status(self):
        """ The status line, e.g. ``404 Not Found``. Set it from a code
            (100-999) or from a line with a custom reason phrase. """
        return self.status_line

    @status.setter
    def status(self, status):
        if isinstance(status, int):
            try:
                reason = HTTPStatus(status).phrase
            except ValueError:
                reason = 'Unknown'
            code, status = status, '%d %s' % (status, reason)
        elif ' ' in status:
            status = status.strip()
            code = int(status.split()[0])
        else:
            raise ValueError('String status line without a reason phrase.')
        if not 100 <= code <= 999:
            raise ValueError('Status code out of range.')
        self.status_code = code
        self.status_line = status

    @property
    def cookies(self):
        """ The recorded `SetCookie` directives, in the order they were set. """
        return list(self._cookies.values())

    @property
    def headerlist(self):
        """ WSGI conform list of (header, value) tuples. """
        import cookiepot
        out = self.headers.items()
        if 'Content-Type' not in self.headers:
            out.append(('Content-Type', self.default_content_type))
        out.append(('Server', 'Cookiepot %s' % cookiepot.__version__))
        out.extend(('Set-Cookie', c.output()) for c in self._cookies.values())
        return [(k, v.encode('utf8').decode('latin1')) for (k, v) in out]

    def set_cookie(self, name, value, max_age=None, expires=None,
                   domain=None, path=None, secure=False, httponly=False):
        """ Create a new cookie or replace an old one with the same name,
            domain and path.

            Args:
                name: the name of the cookie.
                value: the value of the cookie.
                max_age: maximum age in seconds or a timedelta.
                expires: a datetime object or UNIX timestamp.
                domain: the domain that is allowed to read the cookie (default: current host).
                path: limits the cookie to a given path (default: current path).
                secure: limit the cookie to HTTPS connections.
                httponly: prevents client-side javascript to read this cookie.

            A cookie with an invalid name is not set at all, an invalid
            `domain` or `path` is left out and characters not allowed in a
            cookie value are removed. All of these are logged as warnings.
        """
        if not isinstance(value, str):
            raise TypeError('Cookie value must be a string, not %r.' % type(value))
        if len(value) > self.max_cookie_size:
            raise ValueError('Cookie value to long.')

        if not valid_name(name):
            _log('warning', 'Invalid cookie name %r, cookie dropped.', name)
            return

        domain = domain or ''
        if domain and not valid_domain(domain):
            _log('warning', 'Invalid cookie domain %r for %r, attribute dropped.',
                 domain, name)
            domain = ''

        path = path or ''
        if path and not valid_path(path):
            _log('warning', 'Invalid cookie path %r for %r, attribute dropped.',
                 path, name)
            path = ''

        sanitized = ''.join(c for c in value if _valid_value_char(c))
        if sanitized != value:
            _log('warning', 'Invalid characters in value of cookie %r dropped.', name)

        if isinstance(max_age, timedelta):
            max_age = max_age.seconds + max_age.days * 24 * 3600

        cookie = SetCookie(name, sanitized, domain, path, max_age, expires,
                           bool(secure), bool(httponly))
        self._cookies[cookie.key] = cookie

    def delete_cookie(self, key, **kwargs):
        """ Delete a cookie. Be sure to use the same `domain` and `path`
            settings as used to create the cookie, or use
            `deep_delete_cookie`. """
        kwargs['max_age'] = DELETE_MAX_AGE
        kwargs['expires'] = 0
        self.set_cookie(key, '', **kwargs)

    def deep_delete_cookie(self, key, request):
        """ Delete a cookie under every domain and path it could have been
            set with for `request`, see `cookiepot.cookie.deep_delete`. """
        deep_delete(key, self, request)

    def __call__(self, environ, start_response):
        """Process this response as WSGI application.
        """
        start_response(self.status_line, self.headerlist)
        body = self.body if isinstance(self.body, list) else [self.body]
        return [b.encode('utf8') if isinstance(b, str) else bytes(b) for b in body]
