# routes/download_api.py
"""
Plugin download proxy.

GET /api/download?url=https://wordpress.org/plugins/<slug>/

Validates the URL, checks the archive exists upstream and streams the
ZIP straight through to the client.
"""

import logging

from flask import Blueprint, Response, request

from wp_downloader.services.wordpress import (
    PluginDownloadClient,
    PluginDownloadError,
    PluginNotFoundError,
    get_slug_from_url,
)
from wp_downloader.utils.errors import (
    failure_response,
    invalid_plugin_url,
    missing_url,
    plugin_not_found,
    upstream_failure,
)

logger = logging.getLogger(__name__)

download_bp = Blueprint("download_api", __name__, url_prefix="/api")

download_client = PluginDownloadClient()


@download_bp.get("/download")
def download_plugin():
    """
    Proxy the download of a WordPress plugin ZIP.

    Query params:
        url: WordPress.org plugin page URL

    Returns:
        200 with the archive as an attachment named <slug>.zip,
        or {"error": "..."} with 400, 404 or 500
    """
    url = request.args.get("url", "")
    if not url.strip():
        return failure_response(missing_url())

    slug = get_slug_from_url(url)
    if not slug:
        return failure_response(invalid_plugin_url())

    logger.info(f"Attempting download for: {slug}")

    try:
        archive = download_client.download(slug)
    except PluginNotFoundError:
        logger.warning(f"Plugin not found: {slug}")
        return failure_response(plugin_not_found(slug))
    except PluginDownloadError as e:
        logger.error(f"Download failed: {e}")
        return failure_response(upstream_failure())

    return Response(
        download_client.iter_archive(archive.response),
        mimetype="application/zip",
        headers={
            "Content-Disposition": f"attachment; filename={archive.filename}",
        },
    )
