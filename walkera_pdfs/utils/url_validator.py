import re
from urllib.parse import urlsplit

_CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f]')
_BAD_ESCAPE = re.compile(r'%(?![0-9A-Fa-f]{2})')
_SCHEME = re.compile(r'^[A-Za-z][A-Za-z0-9+.\-]*:')


def is_url_valid(uri: str) -> bool:
    """Check that uri parses as a request URI: absolute URL or absolute path.

    Nothing is fetched; an unreachable host is still valid. The query string
    is not inspected, and a scheme followed by an opaque part (mailto:x) is
    accepted as is.
    """
    if not uri or _CONTROL_CHARS.search(uri):
        return False

    rest = uri.split('?', 1)[0]
    scheme = _SCHEME.match(rest)
    if scheme:
        rest = rest[scheme.end():]
        if not rest.startswith('/'):
            return True
    elif not rest.startswith('/'):
        return False

    if _BAD_ESCAPE.search(rest):
        return False

    try:
        urlsplit(uri).port
    except ValueError:
        return False

    return True
