"""Errors raised while building and writing sitemaps."""

from __future__ import annotations


class SitemapError(Exception):
    """Base class for sitemap errors. I/O failures are raised as plain OSError."""


class CapacityExceeded(SitemapError):
    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(
            f"your sitemap has reached the maximum number of items which is {limit}"
        )


class InvalidExtension(SitemapError, ValueError):
    def __init__(self, path: str, extension: str):
        self.path = path
        self.extension = extension
        super().__init__(
            f"filename {path} does not have extension .xml or .gz, extension {extension} given"
        )
