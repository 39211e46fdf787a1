# -*- coding: utf-8 -*-
"""
    cookiepot.cookie
    ~~~~~~~~~~~~~~~~

    Grammar checks for the cookie attributes a server is allowed to send
    (name, domain and path), and `deep_delete` which clears a cookie under
    every domain/path scope a browser may have stored it with.
"""
import posixpath
import ipaddress

#: Lifetime that tells the browser to drop the cookie right away. Must be
#: negative, some clients read zero as a session cookie.
DELETE_MAX_AGE = -1

_token_chars = frozenset(
    'abcdefghijklmnopqrstuvwxyz'
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
    '0123456789'
    "!#$%&'*+-.^_`|~"
)

#: Token character class of RFC 7230, indexed by code point.
_token_table = tuple(chr(i) in _token_chars for i in range(127))

_label_chars = frozenset(
    'abcdefghijklmnopqrstuvwxyz'
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
    '0123456789-'
)


def _is_token(c):
    i = ord(c)
    return i < len(_token_table) and _token_table[i]


def valid_name(name):
    """Return `True` if `name` is a non-empty HTTP token and therefore
    usable as a cookie name."""
    if not name:
        return False
    for c in name:
        if not _is_token(c):
            return False
    return True


def valid_domain(domain):
    """Return `True` if `domain` can be sent as a cookie ``Domain``
    attribute.

    Either a literal IPv4 address or a dotted domain name with a leading
    dot and at least two labels after it. IPv6 literals are refused, as
    browsers do not store cookies for them.
    """
    if _is_cookie_domain_name(domain):
        return True
    if ':' in domain:
        return False
    try:
        ipaddress.ip_address(domain)
    except ValueError:
        return False
    return True


def valid_path(path):
    """Return `True` if every character of `path` is printable ASCII and
    none of them is a semicolon. The empty path is valid."""
    for c in path:
        if not (0x20 <= ord(c) < 0x7f and c != ';'):
            return False
    return True


def _is_cookie_domain_name(s):
    """Check the domain name grammar, requiring the leading dot and two
    domain parts since browsers refuse cookies on top level domains."""
    if not s or len(s) > 255:
        return False
    if s[0] != '.':
        return False

    last = '.'
    has_letter = False
    partlen = 0
    for c in s[1:]:
        if c == '.':
            if last in '.-':
                return False
            if partlen == 0 or partlen > 63:
                return False
            partlen = 0
        elif c in _label_chars:
            # no '-' right after a dot
            if c == '-' and last == '.':
                return False
            if c.isalpha():
                has_letter = True
            partlen += 1
        else:
            return False
        last = c

    if last == '-' or partlen > 63:
        return False
    if not has_letter:
        return False
    return s.count('.') >= 2


def _strip_port(host):
    if host.endswith(']'):
        return host
    name, sep, port = host.rpartition(':')
    if sep and port.isdigit() and ':' not in name:
        return name
    return host


def domain_variants(host):
    """Domain attributes a cookie could have been set with from `host`,
    from the exact host (no attribute) up to the shortest two label
    suffix.

    >>> domain_variants('www.example.com')
    ['', '.www.example.com', '.example.com']
    """
    domains = ['']
    domain = '.' + _strip_port(host)
    while True:
        domains.append(domain)
        parts = domain.split('.')[2:]
        if len(parts) < 2:
            break
        domain = '.' + '.'.join(parts)
    return domains


def _parent(path):
    parent = posixpath.normpath(posixpath.dirname(path))
    # normpath keeps a leading '//'
    if parent.startswith('//'):
        parent = '/' + parent.lstrip('/')
    return parent


def path_variants(path):
    """Path attributes a cookie could have been set with for a request to
    `path`: no attribute, the root, then `path` and each of its parents.

    >>> path_variants('/account/settings')
    ['', '/', '/account/settings', '/account']
    """
    paths = ['', '/']
    while path not in ('', '.', '/'):
        if path in paths:
            break
        paths.append(path)
        path = _parent(path)
    return paths


def deep_delete(cookie_name, response, request):
    """Instruct the browser to drop every cookie called `cookie_name`,
    whatever domain and path it was originally set with.

    The browser only sends back name and value, so the scope used to set
    the cookie is unknown and a deletion with a different scope leaves
    the original in place. One deletion is therefore recorded on
    `response` for each pair of `domain_variants` and `path_variants`
    of the current `request`.

    Args:
        cookie_name: the name of the cookie to remove.
        response: a sink with a `set_cookie` method, normally a
            `cookiepot.response.Response`.
        request: anything with `host` and `path` attributes, normally a
            `cookiepot.request.Request`.
    """
    domains = domain_variants(request.host)
    paths = path_variants(request.path)
    for domain in domains:
        for path in paths:
            response.set_cookie(cookie_name, '',
                                max_age=DELETE_MAX_AGE,
                                expires=0,
                                secure=True,
                                httponly=True,
                                domain=domain,
                                path=path)
