# services/wordpress/download_client.py
"""
Client for the WordPress.org plugin download repository.

Checks that an archive exists with a HEAD request, then opens a
streaming GET so the archive can be relayed chunk by chunk without
ever holding the whole file in memory.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

import requests

from wp_downloader.core import config
from .slug_parser import attachment_filename, build_download_url

logger = logging.getLogger(__name__)


class PluginDownloadError(Exception):
    """Base exception for plugin download failures."""

    def __init__(self, slug: str, message: str):
        super().__init__(message)
        self.slug = slug


class PluginNotFoundError(PluginDownloadError):
    """Raised when the repository answers 404 for a slug."""

    def __init__(self, slug: str):
        super().__init__(slug, f"Plugin {slug} not found upstream")


class UpstreamError(PluginDownloadError):
    """Raised on timeouts, connection failures and unexpected statuses."""
    pass


@dataclass
class PluginArchive:
    """An archive whose upstream body is open and not yet consumed."""

    slug: str
    filename: str
    download_url: str
    response: requests.Response


class PluginDownloadClient:
    """
    Stateless client for downloads.wordpress.org.

    Usage:
        client = PluginDownloadClient()

        archive = client.download("akismet")
        for chunk in client.iter_archive(archive.response):
            out.write(chunk)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        probe_timeout: Optional[float] = None,
        download_timeout: Optional[float] = None,
        chunk_size: Optional[int] = None,
    ):
        self.base_url = base_url if base_url is not None else config.DOWNLOADS_BASE_URL
        self.probe_timeout = (
            probe_timeout if probe_timeout is not None else config.PROBE_TIMEOUT
        )
        self.download_timeout = (
            download_timeout if download_timeout is not None else config.DOWNLOAD_TIMEOUT
        )
        self.chunk_size = chunk_size if chunk_size is not None else config.CHUNK_SIZE

    def download_url(self, slug: str) -> str:
        return build_download_url(slug, self.base_url)

    def _check_status(self, slug: str, response: requests.Response):
        if response.status_code == 404:
            response.close()
            raise PluginNotFoundError(slug)
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            response.close()
            raise UpstreamError(slug, f"Unexpected upstream status for {slug}: {e}")

    def probe(self, slug: str) -> None:
        """
        Check the archive exists without transferring its body.

        Raises:
            PluginNotFoundError: If upstream answers 404
            UpstreamError: On any other failure
        """
        url = self.download_url(slug)
        try:
            response = requests.head(
                url, timeout=self.probe_timeout, allow_redirects=True
            )
        except requests.RequestException as e:
            raise UpstreamError(slug, f"Existence check for {slug} failed: {e}")

        self._check_status(slug, response)

    def open_stream(self, slug: str) -> requests.Response:
        """
        Start a streaming GET of the archive.

        The caller owns the returned response and must close it, which
        iter_archive() does.

        Raises:
            PluginNotFoundError: If upstream answers 404
            UpstreamError: On any other failure
        """
        url = self.download_url(slug)
        try:
            response = requests.get(url, stream=True, timeout=self.download_timeout)
        except requests.RequestException as e:
            raise UpstreamError(slug, f"Download of {slug} failed: {e}")

        self._check_status(slug, response)
        return response

    def download(self, slug: str) -> PluginArchive:
        """Probe, then open the archive stream. The GET never precedes the probe."""
        self.probe(slug)
        response = self.open_stream(slug)
        return PluginArchive(
            slug=slug,
            filename=attachment_filename(slug),
            download_url=self.download_url(slug),
            response=response,
        )

    def iter_archive(
        self, response: requests.Response, chunk_size: Optional[int] = None
    ) -> Iterator[bytes]:
        """
        Yield the archive body chunk by chunk.

        The upstream response is closed when the body is exhausted, when
        reading fails, and when the consumer stops early (closing this
        generator, e.g. because the client disconnected).

        Raises:
            requests.RequestException: If upstream fails mid-body
        """
        sent = 0
        try:
            for chunk in response.iter_content(chunk_size=chunk_size or self.chunk_size):
                if chunk:
                    sent += len(chunk)
                    yield chunk
        except requests.RequestException as e:
            # Headers are already out, the server has to abort the connection
            logger.error(f"Relay from {response.url} aborted after {sent} bytes: {e}")
            raise
        finally:
            response.close()
            logger.debug(f"Relayed {sent} bytes from {response.url}")
