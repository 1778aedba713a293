#!/usr/bin/env python3
"""Build a sitemap from a list of URLs: urls file -> Sitemap -> .xml / .gz."""

from __future__ import annotations

import argparse
import os
import sys
from datetime import datetime
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from pydantic import ValidationError

from src.config import Settings
from src.sitemap import MAX_SITEMAP_ITEMS, Sitemap, SitemapError, SitemapItem


def _read_urls(source: str) -> list[str]:
    """One URL per line; blank lines and # comments are skipped."""
    if source == "-":
        lines = sys.stdin.read().splitlines()
    else:
        lines = Path(source).read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip() and not line.strip().startswith("#")]


def _split_path(output: str, n: int) -> str:
    """sitemap.xml.gz -> sitemap-1.xml.gz"""
    directory, name = os.path.split(output)
    stem, _, rest = name.partition(".")
    return os.path.join(directory, f"{stem}-{n}.{rest}" if rest else f"{stem}-{n}")


def main(argv: list[str] | None = None) -> None:
    try:
        settings = Settings()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}")
        sys.exit(1)
    parser = argparse.ArgumentParser(description="Write a sitemap for a list of URLs")
    parser.add_argument("urls", help="File with one URL per line, or - for stdin")
    parser.add_argument(
        "-o",
        "--output",
        default=os.path.join(settings.sitemap_dir, "sitemap.xml"),
        help="Output path ending in .xml or .gz (default %(default)s)",
    )
    parser.add_argument(
        "--changefreq",
        default=settings.default_change_frequency,
        help="Change frequency for every URL (default %(default)s)",
    )
    parser.add_argument(
        "--priority",
        type=float,
        default=settings.default_priority,
        help="Priority for every URL (default %(default)s)",
    )
    parser.add_argument(
        "--split",
        action="store_true",
        help=f"Write numbered sitemaps of {MAX_SITEMAP_ITEMS} URLs instead of failing when the cap is hit",
    )
    args = parser.parse_args(argv)

    try:
        urls = _read_urls(args.urls)
    except OSError as e:
        print(f"Error: could not read URLs: {e}")
        sys.exit(1)
    print(f"Read {len(urls)} URLs", flush=True)

    now = datetime.now().astimezone()
    items = [SitemapItem(url, now, args.changefreq, args.priority) for url in urls]

    if args.split and len(items) > MAX_SITEMAP_ITEMS:
        chunks = [items[i : i + MAX_SITEMAP_ITEMS] for i in range(0, len(items), MAX_SITEMAP_ITEMS)]
        outputs = [(_split_path(args.output, n), chunk) for n, chunk in enumerate(chunks, start=1)]
    else:
        outputs = [(args.output, items)]

    try:
        for path, chunk in outputs:
            sitemap = Sitemap()
            for item in chunk:
                sitemap.add(item)
            Path(path).parent.mkdir(parents=True, exist_ok=True)
            sitemap.write_to_file(path)
            print(f"Wrote {path} ({len(sitemap)} URLs)", flush=True)
    except (SitemapError, OSError) as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
