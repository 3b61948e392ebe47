"""
Display helpers for card links.

These helpers never raise: a link that cannot be parsed, or that is not
an http(s) URL, degrades to plain text or a generic label.
"""

import re
from typing import Optional
from urllib.parse import urlsplit

# youtu.be/<id>, youtube.com/watch?v=<id>, /embed/<id>, /v/<id>, /e/<id>
YOUTUBE_ID_RE = re.compile(
    r'(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)([^"&?/ ]{11})'
)

GENERIC_LINK_LABEL = "Link 🔗"

LINK_SCHEMES = ("http", "https")


def extract_youtube_id(url: Optional[str]) -> Optional[str]:
    """Return the 11‑character YouTube video id in ``url``, if any.

    >>> extract_youtube_id("https://youtu.be/dQw4w9WgXcQ")
    'dQw4w9WgXcQ'
    """
    if not url:
        return None
    match = YOUTUBE_ID_RE.search(url)
    return match.group(1) if match else None


def youtube_embed_url(url: Optional[str]) -> Optional[str]:
    video_id = extract_youtube_id(url)
    if video_id is None:
        return None
    return f"https://www.youtube.com/embed/{video_id}"


def _hostname(url: str) -> Optional[str]:
    try:
        parts = urlsplit(url)
    except ValueError:
        return None
    if not parts.scheme or not parts.hostname:
        return None
    return parts.hostname


def safe_url(url: Optional[str]) -> Optional[str]:
    """Return ``url`` if it may be used as a link target, else ``None``.

    Only absolute http(s) URLs with a host qualify, which keeps
    ``javascript:`` and ``data:`` links out of rendered pages.

    >>> safe_url("javascript:alert(1)") is None
    True
    """
    if not url or _hostname(url) is None:
        return None
    if urlsplit(url).scheme.lower() not in LINK_SCHEMES:
        return None
    return url


def link_label(url: Optional[str]) -> str:
    """Host name of ``url``, or a generic label when it has none."""
    host = _hostname(url) if url else None
    return host or GENERIC_LINK_LABEL


def favicon_url(url: Optional[str]) -> Optional[str]:
    host = _hostname(url) if url else None
    if host is None:
        return None
    return f"https://www.google.com/s2/favicons?domain={host}"
