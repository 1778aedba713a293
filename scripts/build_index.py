#!/usr/bin/env python3
"""Scan a directory of sitemaps and write a sitemap index for them."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from pydantic import ValidationError

from src.config import Settings
from src.sitemap import SitemapError, SitemapIndex, build_index_from_directory


def main(argv: list[str] | None = None) -> None:
    try:
        settings = Settings()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}")
        sys.exit(1)
    parser = argparse.ArgumentParser(description="Write a sitemap index for a directory of sitemaps")
    parser.add_argument(
        "directory",
        nargs="?",
        default=settings.sitemap_dir,
        help="Directory holding .xml / .gz sitemaps (default %(default)s)",
    )
    parser.add_argument(
        "--prefix",
        default=settings.sitemap_base_url,
        help="Public URL prefix for each sitemap, e.g. https://example.com/sitemaps/",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help=f"Index path ending in .xml or .gz (default <directory>/{settings.sitemap_index_file})",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="Sort entries by location instead of directory listing order",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    output = args.output or os.path.join(args.directory, settings.sitemap_index_file)

    print(f"Scanning {args.directory}...", flush=True)
    try:
        scanned = build_index_from_directory(args.directory, args.prefix, verbose=args.verbose)
    except OSError as e:
        print(f"Error: could not read directory: {e}")
        sys.exit(1)

    # The index may live in the scanned directory; don't list it inside itself
    items = list(scanned)
    if os.path.realpath(os.path.dirname(output) or ".") == os.path.realpath(args.directory):
        output_name = os.path.basename(output)
        items = [item for item in items if os.path.basename(item.location) != output_name]
    if args.sort:
        items.sort(key=lambda item: item.location)
    index = SitemapIndex(items)
    print(f"Found {len(index)} sitemaps", flush=True)

    try:
        index.write_to_file(output)
    except (SitemapError, OSError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Wrote {output}", flush=True)


if __name__ == "__main__":
    main()
