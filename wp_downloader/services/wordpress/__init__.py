"""
WordPress.org plugin repository services.

This package provides:
- get_slug_from_url: Extract a plugin slug from a plugin page URL
- normalize_path: Browser-style dot segment resolution
- build_download_url / attachment_filename: Values derived from a slug
- PluginDownloadClient: Existence probe and streaming download
- PluginDownloadError, PluginNotFoundError, UpstreamError: Failure types
"""

from .slug_parser import (
    PLUGIN_PATH_PATTERN,
    attachment_filename,
    build_download_url,
    get_slug_from_url,
    is_plugin_url,
    normalize_path,
)
from .download_client import (
    PluginArchive,
    PluginDownloadClient,
    PluginDownloadError,
    PluginNotFoundError,
    UpstreamError,
)

__all__ = [
    "PLUGIN_PATH_PATTERN",
    "attachment_filename",
    "build_download_url",
    "get_slug_from_url",
    "is_plugin_url",
    "normalize_path",
    "PluginArchive",
    "PluginDownloadClient",
    "PluginDownloadError",
    "PluginNotFoundError",
    "UpstreamError",
]
