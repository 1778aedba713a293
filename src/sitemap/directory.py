"""Build a sitemap index from the sitemap files found in a directory."""

from __future__ import annotations

import os
from datetime import datetime

from .models import SitemapIndexItem
from .sitemap import FILE_EXTENSIONS, SitemapIndex, file_extension


def build_index_from_directory(
    directory: str,
    path_prefix: str = "",
    *,
    verbose: bool = False,
) -> SitemapIndex:
    """
    Scan directory (non-recursively) for .xml and .gz files and index them.

    Each entry's location is path_prefix + file name, or the file joined onto
    directory when no prefix is given. Its lastmod is the file's modification
    time in local time. Entries keep the order the filesystem lists them in.
    Raises OSError if the directory cannot be listed.
    """
    index = SitemapIndex()

    with os.scandir(directory) as it:
        entries = list(it)

    for entry in entries:
        if file_extension(entry.name) not in FILE_EXTENSIONS:
            if verbose:
                print(f"  Skipping {entry.name}")
            continue

        if path_prefix:
            location = path_prefix + entry.name
        else:
            location = os.path.join(directory, entry.name)

        mtime = entry.stat(follow_symlinks=False).st_mtime
        index.add(SitemapIndexItem(location, datetime.fromtimestamp(mtime).astimezone()))
        if verbose:
            print(f"  Indexed {location}")

    return index
