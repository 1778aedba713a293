"""Sitemap and sitemap index documents: render to XML and write as .xml or .gz."""

from __future__ import annotations

import gzip
import os
from typing import Iterator

from .errors import CapacityExceeded, InvalidExtension
from .models import SitemapIndexItem, SitemapItem

# sitemaps.org limit for a single sitemap file
MAX_SITEMAP_ITEMS = 50000
SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
FILE_EXTENSIONS = (".xml", ".gz")

URLSET_XML = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<urlset xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"\n'
    f'\txsi:schemaLocation="{SITEMAP_NS} {SITEMAP_NS}/sitemap.xsd"\n'
    f'\txmlns="{SITEMAP_NS}">{{items}}'
    "</urlset>"
)

SITEMAPINDEX_XML = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    f'<sitemapindex xmlns="{SITEMAP_NS}">{{items}}'
    "</sitemapindex>\n"
)


def file_extension(path: str) -> str:
    """Final extension of the file name including the dot ("a.xml.gz" -> ".gz"), or ""."""
    name = os.path.basename(path)
    dot = name.rfind(".")
    if dot < 0:
        return ""
    return name[dot:]


def _join(items) -> str:
    # Each entry is closed by a newline, then entries are newline-separated
    return "\n".join(item.render() + "\n" for item in items)


def write_document(path: str, text: str) -> None:
    """
    Write rendered XML to path, gzip-compressed when the extension is .gz.

    The file is created (or truncated) before the extension is checked, so an
    unsupported extension raises InvalidExtension and leaves an empty file behind.
    """
    with open(path, "wb") as f:
        ext = file_extension(path)
        if ext not in FILE_EXTENSIONS:
            raise InvalidExtension(path, ext)

        data = text.encode("utf-8")
        if ext == ".gz":
            # Empty name and zero mtime in the header keep the output reproducible
            with gzip.GzipFile(filename="", fileobj=f, mode="wb", mtime=0) as zf:
                zf.write(data)
        else:
            f.write(data)


class Sitemap:
    """Ordered collection of up to MAX_SITEMAP_ITEMS url entries."""

    def __init__(self, items: list[SitemapItem] | None = None):
        self._items: list[SitemapItem] = []
        for item in items or []:
            self.add(item)

    @property
    def items(self) -> tuple[SitemapItem, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[SitemapItem]:
        return iter(self._items)

    def add(self, item: SitemapItem) -> None:
        """Append item. Raises CapacityExceeded once the sitemap is full."""
        if len(self._items) >= MAX_SITEMAP_ITEMS:
            raise CapacityExceeded(MAX_SITEMAP_ITEMS)
        self._items.append(item)

    def render(self) -> str:
        return URLSET_XML.format(items=_join(self._items))

    def write_to_file(self, path: str) -> None:
        """Save to a .xml file, or a gzipped one if path ends in .gz."""
        write_document(path, self.render())

    def __str__(self) -> str:
        return self.render()


class SitemapIndex:
    """Ordered collection of sitemap references. No item cap is enforced."""

    def __init__(self, items: list[SitemapIndexItem] | None = None):
        self._items: list[SitemapIndexItem] = list(items or [])

    @property
    def items(self) -> tuple[SitemapIndexItem, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[SitemapIndexItem]:
        return iter(self._items)

    def add(self, item: SitemapIndexItem) -> None:
        self._items.append(item)

    def render(self) -> str:
        return SITEMAPINDEX_XML.format(items=_join(self._items))

    def write_to_file(self, path: str) -> None:
        """Save to a .xml file, or a gzipped one if path ends in .gz."""
        write_document(path, self.render())

    def __str__(self) -> str:
        return self.render()
