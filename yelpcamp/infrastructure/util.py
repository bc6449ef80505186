"""
Handy things
"""
from urllib.parse import parse_qs, urlparse

OVERRIDABLE_METHODS = frozenset(['PUT', 'PATCH', 'DELETE'])

class MethodRewriteMiddleware(object):
    """
    WSGI middleware so that HTML forms can PUT and DELETE.

    A POST whose query string has _method=PUT is passed on as a PUT. Anything
    else is passed on unchanged.
    """
    def __init__(self, app):
        self.app = app

    def __call__(self, environ, start_response):
        if environ.get('REQUEST_METHOD', '').upper() == 'POST':
            args = parse_qs(environ.get('QUERY_STRING', ''))
            method = args.get('_method', [''])[0].upper()
            if method in OVERRIDABLE_METHODS:
                environ['REQUEST_METHOD'] = method
        return self.app(environ, start_response)

def is_safe_redirect(target, current_url):
    """
    Is target on the same site as current_url?

    Avoids open redirect - a minor security vulnerability
    """
    if not target:
        return False
    nxt = urlparse(target)
    cur = urlparse(current_url)
    if nxt.scheme and nxt.scheme != cur.scheme:
        return False
    if nxt.netloc and nxt.netloc != cur.netloc:
        return False
    return True
