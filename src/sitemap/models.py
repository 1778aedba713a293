"""Sitemap entries and their XML fragments."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from datetime import datetime, timedelta

CHANGE_FREQUENCIES = (
    "always",
    "hourly",
    "daily",
    "weekly",
    "monthly",
    "yearly",
    "never",
)

URL_XML = """
\t<url>
\t\t<loc>{loc}</loc>
\t\t<lastmod>{lastmod}</lastmod>
\t\t<changefreq>{changefreq}</changefreq>
\t\t<priority>{priority:.1f}</priority>
\t</url>"""

SITEMAP_XML = """
\t<sitemap>
\t\t<loc>{loc}</loc>
\t\t<lastmod>{lastmod}</lastmod>
\t</sitemap>"""


def format_rfc3339(dt: datetime) -> str:
    """
    Format a datetime as RFC3339 with second precision.

    Keeps the offset the value carries; a zero offset is written as "Z".
    Naive datetimes are treated as UTC.
    """
    offset = dt.utcoffset()
    if offset is None:
        offset = timedelta(0)
    # strftime("%Y") does not pad years below 1000 on every platform
    stamp = f"{dt.year:04d}-" + dt.strftime("%m-%dT%H:%M:%S")
    if offset == timedelta(0):
        return stamp + "Z"
    sign = "+" if offset > timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{stamp}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class SitemapItem:
    """One <url> entry. Location is written verbatim, without XML escaping."""

    location: str
    last_modified: datetime
    change_frequency: str
    priority: float = 0.5

    def __post_init__(self) -> None:
        object.__setattr__(self, "priority", _float32(float(self.priority)))

    def render(self) -> str:
        return URL_XML.format(
            loc=self.location,
            lastmod=format_rfc3339(self.last_modified),
            changefreq=self.change_frequency,
            priority=self.priority,
        )


@dataclass(frozen=True)
class SitemapIndexItem:
    """One <sitemap> entry of a sitemap index."""

    location: str
    last_modified: datetime

    def render(self) -> str:
        return SITEMAP_XML.format(
            loc=self.location,
            lastmod=format_rfc3339(self.last_modified),
        )
