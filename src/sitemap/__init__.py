from .directory import build_index_from_directory
from .errors import CapacityExceeded, InvalidExtension, SitemapError
from .models import CHANGE_FREQUENCIES, SitemapIndexItem, SitemapItem, format_rfc3339
from .sitemap import MAX_SITEMAP_ITEMS, Sitemap, SitemapIndex

__all__ = [
    "build_index_from_directory",
    "CapacityExceeded",
    "InvalidExtension",
    "SitemapError",
    "CHANGE_FREQUENCIES",
    "SitemapIndexItem",
    "SitemapItem",
    "format_rfc3339",
    "MAX_SITEMAP_ITEMS",
    "Sitemap",
    "SitemapIndex",
]
