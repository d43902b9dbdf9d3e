# services/wordpress/slug_parser.py
"""
WordPress.org plugin URL parsing.

Turns a plugin page URL into the plugin slug and derives the values
that hang off it (download URL, attachment filename).

    >>> get_slug_from_url("https://wordpress.org/plugins/list-github-repositories/")
    'list-github-repositories'
"""

import re
from typing import Optional
from urllib.parse import urlsplit

from wp_downloader.core.config import DOWNLOADS_BASE_URL

# "/plugins/<slug>" with one optional trailing slash, at the end of the path
PLUGIN_PATH_PATTERN = re.compile(r"/plugins/([a-z0-9-]+)/?\Z", re.IGNORECASE)

# Browsers treat a backslash as "/" in these schemes
SPECIAL_SCHEME_PATTERN = re.compile(r"^(?:https?|wss?|ftp|file):", re.IGNORECASE)

SINGLE_DOT_SEGMENTS = {".", "%2e"}
DOUBLE_DOT_SEGMENTS = {"..", ".%2e", "%2e.", "%2e%2e"}


def normalize_path(path: str) -> str:
    """
    Resolve "." and ".." segments the way a browser does.

    "/plugins/akismet/." -> "/plugins/akismet/"
    "/plugins/x/../akismet" -> "/plugins/akismet"
    """
    segments = path.split("/")[1:]
    resolved = []
    for i, segment in enumerate(segments):
        last = i == len(segments) - 1
        lowered = segment.lower()
        if lowered in DOUBLE_DOT_SEGMENTS:
            if resolved:
                resolved.pop()
            if last:
                resolved.append("")
        elif lowered in SINGLE_DOT_SEGMENTS:
            if last:
                resolved.append("")
        else:
            resolved.append(segment)
    return "/" + "/".join(resolved)


def get_slug_from_url(url: Optional[str]) -> Optional[str]:
    """
    Extract the plugin slug from a WordPress plugin page URL.

    Only the path is inspected, so query strings and fragments are
    ignored. Backslashes and dot segments are resolved first, as a
    browser would. Anything that does not parse as an absolute URL is
    treated as "no slug" rather than an error.

    Args:
        url: e.g. "https://wordpress.org/plugins/akismet/"

    Returns:
        The slug with its original casing, or None
    """
    if not url or not isinstance(url, str):
        return None

    url = url.strip()
    if SPECIAL_SCHEME_PATTERN.match(url):
        url = url.replace("\\", "/")

    try:
        parts = urlsplit(url)
    except ValueError:
        # e.g. an unterminated IPv6 literal
        return None

    if not parts.scheme or not parts.netloc:
        return None

    match = PLUGIN_PATH_PATTERN.search(normalize_path(parts.path))
    return match.group(1) if match else None


def is_plugin_url(url: Optional[str]) -> bool:
    """Check whether a URL points at a WordPress plugin page."""
    return get_slug_from_url(url) is not None


def build_download_url(slug: str, base_url: str = DOWNLOADS_BASE_URL) -> str:
    """Official repository archive URL for a slug."""
    return f"{base_url.rstrip('/')}/{slug}.zip"


def attachment_filename(slug: str) -> str:
    return f"{slug}.zip"
