import posixpath
import re

_NON_ALNUM = re.compile(r'[^a-z0-9]')
_UNDERSCORES = re.compile(r'_+')

# fragments left behind when ".pdf" was already part of the name
INVALID_SUBSTRINGS = ['_pdf']


def get_filename(path: str) -> str:
    """Last element of path, ignoring trailing slashes"""
    if path == '':
        return '.'
    stripped = path.rstrip('/')
    if stripped == '':
        return '/'
    return posixpath.basename(stripped)


def get_file_extension(path: str) -> str:
    name = get_filename(path)
    dot = name.rfind('.')
    return name[dot:] if dot >= 0 else ''


def url_to_filename(raw_url: str) -> str:
    """Turn a URL into a lowercase, filesystem-safe name ending in .pdf.

    The same URL always maps to the same name, so files downloaded on an
    earlier run are recognised and skipped.
    """
    lower = get_filename(raw_url.lower())

    safe = _NON_ALNUM.sub('_', lower)
    safe = _UNDERSCORES.sub('_', safe)
    safe = safe.strip('_')

    for invalid in INVALID_SUBSTRINGS:
        safe = safe.replace(invalid, '')

    if get_file_extension(safe) != '.pdf':
        safe = safe + '.pdf'

    return safe
