"""MIME type inference from URLs."""

import mimetypes
from urllib.parse import urlparse

DEFAULT_MIME_TYPE = "application/octet-stream"


def get_mime_type(url: str) -> str:
    """Guess the MIME type of a dereferenceable URL from its path extension."""
    path = urlparse(url).path or url
    mime_type, _ = mimetypes.guess_type(path)
    return mime_type or DEFAULT_MIME_TYPE
