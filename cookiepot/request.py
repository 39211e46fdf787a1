# -*- coding: utf-8 -*-


class Request(object):
    """ The part of a WSGI environ that decides where a cookie lives:
        the host and the path of the current request. """

    #: the charset the path is decoded with
    charset = 'utf-8'

    def __init__(self, environ):
        self.environ = environ

    def __repr__(self):
        try:
            target = self.host + self.path
        except KeyError:
            target = '(invalid WSGI environ)'
        return '<%s %s>' % (self.__class__.__name__, target)

    @property
    def host(self):
        """The host the client asked for, port included. `X-Forwarded-Host`
        wins over `Host`, which wins over ``SERVER_NAME``.
        """
        environ = self.environ
        if 'HTTP_X_FORWARDED_HOST' in environ:
            return environ['HTTP_X_FORWARDED_HOST'].split(',', 1)[0].strip()
        if 'HTTP_HOST' in environ:
            return environ['HTTP_HOST']
        host = environ['SERVER_NAME']
        if (environ['wsgi.url_scheme'], environ['SERVER_PORT']) not \
           in (('https', '443'), ('http', '80')):
            host += ':%s' % environ['SERVER_PORT']
        return host

    @property
    def path(self):
        """Requested path with a single leading slash."""
        raw = self.environ.get('PATH_INFO', '')
        # PEP 3333 passes the raw bytes on as latin1
        try:
            raw = raw.encode('latin1').decode(self.charset, 'replace')
        except UnicodeEncodeError:
            pass
        return '/' + raw.lstrip('/')
