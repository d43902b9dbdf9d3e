# utils/errors.py
"""
Standardized API error responses.

Every failure of the download endpoint falls into one of three kinds,
each bound to a fixed HTTP status:

- INPUT      (400): missing or malformed plugin URL
- NOT_FOUND  (404): the upstream repository has no such plugin
- UPSTREAM   (500): anything else that went wrong talking to upstream

All errors are rendered as {"error": "human readable message"} so the
bundled client can show the message as-is.
"""

from dataclasses import dataclass
from enum import Enum

from flask import jsonify

from wp_downloader.core.config import EXAMPLE_PLUGIN_URL


class ErrorKind(Enum):
    INPUT = "input_error"
    NOT_FOUND = "not_found"
    UPSTREAM = "upstream_error"

    @property
    def status(self) -> int:
        return _STATUS_BY_KIND[self]


_STATUS_BY_KIND = {
    ErrorKind.INPUT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UPSTREAM: 500,
}


@dataclass(frozen=True)
class DownloadFailure:
    """A handled failure, mapped to an HTTP response at the route boundary."""

    kind: ErrorKind
    message: str

    @property
    def status(self) -> int:
        return self.kind.status


# -----------------------------------------------------------------------------
# Standard HTTP Error Responses
# -----------------------------------------------------------------------------

def error_response(message: str, status: int = 400):
    """
    Create a standardized error response.

    Args:
        message: Human-readable explanation shown to the client
        status: HTTP status code

    Returns:
        Tuple of (jsonify response, status code)
    """
    return jsonify({"error": message}), status


def failure_response(failure: DownloadFailure):
    """Render a DownloadFailure with the status its kind maps to."""
    return error_response(failure.message, failure.status)


# -----------------------------------------------------------------------------
# Domain-Specific Errors
# -----------------------------------------------------------------------------

def missing_url() -> DownloadFailure:
    """No url query parameter was given."""
    return DownloadFailure(ErrorKind.INPUT, "Please provide a URL.")


def invalid_plugin_url() -> DownloadFailure:
    """The url parameter is not a WordPress.org plugin page."""
    return DownloadFailure(
        ErrorKind.INPUT,
        "Invalid WordPress Plugin URL. It should look like: "
        f"{EXAMPLE_PLUGIN_URL}",
    )


def plugin_not_found(slug: str) -> DownloadFailure:
    """Upstream answered 404 for this slug."""
    return DownloadFailure(
        ErrorKind.NOT_FOUND,
        f'Plugin not found. The slug "{slug}" does not exist in the repository.',
    )


def upstream_failure() -> DownloadFailure:
    """Generic upstream failure; never carries internal detail."""
    return DownloadFailure(
        ErrorKind.UPSTREAM, "Internal Server Error. Could not fetch plugin."
    )
