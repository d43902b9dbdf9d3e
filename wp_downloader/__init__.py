"""
WordPress plugin downloader.

Proxies WordPress.org plugin archives: takes a plugin page URL, checks
the archive exists on downloads.wordpress.org and streams it back.
"""

__version__ = "1.0.0"
