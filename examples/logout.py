from wsgiref.simple_server import make_server
from cookiepot import Request, Response


def app(environ, start_response):
    request = Request(environ)
    response = Response('Logged out of %s' % request.host)
    response.deep_delete_cookie('sid', request)
    return response(environ, start_response)

if __name__ == '__main__':
    make_server('localhost', 3000, app).serve_forever()
