import pytest

from cookiepot.request import Request
import copy

env1 = {
    'REQUEST_METHOD':       'POST',
    'SCRIPT_NAME':          '/foo',
    'PATH_INFO':            '/bar',
    'SERVER_NAME':          'test.cookiepot.org',
    'SERVER_PORT':          '80',
    'HTTP_HOST':            'test.cookiepot.org',
    'wsgi.url_scheme':      'http'
}


def test_basic_request():
    req = Request(dict(copy.deepcopy(env1)))
    assert req.path == '/bar'
    assert req.host == 'test.cookiepot.org'
    assert repr(req) == '<Request test.cookiepot.org/bar>'


def test_request_host():
    env = dict(copy.deepcopy(env1))
    env['HTTP_X_FORWARDED_HOST'] = 'test.cookiepot.org'
    assert Request(env).host == 'test.cookiepot.org'
    env['HTTP_X_FORWARDED_HOST'] = 'test.cookiepot.org, a.proxy.org'
    assert Request(env).host == 'test.cookiepot.org'

    env = dict(copy.deepcopy(env1))
    env.pop('HTTP_HOST')
    env['SERVER_PORT'] = '8080'
    assert Request(env).host == 'test.cookiepot.org:8080'
    env['wsgi.url_scheme'] = 'https'
    env['SERVER_PORT'] = '443'
    assert Request(env).host == 'test.cookiepot.org'


def test_request_path():
    env = dict(copy.deepcopy(env1))
    env['PATH_INFO'] = ''
    assert Request(env).path == '/'
    env['PATH_INFO'] = '//account/settings'
    assert Request(env).path == '/account/settings'
    env['PATH_INFO'] = '/caf\xc3\xa9'
    assert Request(env).path == '/caf\xe9'
    env['PATH_INFO'] = '/☃'
    assert Request(env).path == '/☃'


def test_invalid_environ():
    req = Request({})
    assert 'invalid WSGI environ' in repr(req)
    assert req.path == '/'
