from datetime import datetime, timezone

from flask import Blueprint, jsonify

from wp_downloader import __version__
from wp_downloader.core.config import DOWNLOADS_BASE_URL

status_bp = Blueprint("status_api", __name__)


@status_bp.get("/status")
def status():
    """Basic liveness check. Does not contact upstream."""
    return jsonify(
        {
            "status": "ok",
            "version": __version__,
            "upstream": DOWNLOADS_BASE_URL,
            "time_utc": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        }
    )
