"""Tests for the command-line scripts."""

import gzip
import runpy
import sys
from pathlib import Path

import pytest

from src.sitemap import MAX_SITEMAP_ITEMS

SCRIPTS = Path(__file__).resolve().parent.parent / "scripts"


def _run(script, monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", [script, *args])
    runpy.run_path(str(SCRIPTS / script), run_name="__main__")


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for key in ("SITEMAP_DIR", "SITEMAP_BASE_URL", "SITEMAP_INDEX_FILE", "DEFAULT_CHANGE_FREQUENCY", "DEFAULT_PRIORITY"):
        monkeypatch.delenv(key, raising=False)


def test_build_sitemap(tmp_path, monkeypatch):
    """URLs file becomes a gzipped sitemap."""
    urls = tmp_path / "urls.txt"
    urls.write_text("# pages\nhttps://example.com/a\n\nhttps://example.com/b\n")
    out = tmp_path / "out" / "sitemap.xml.gz"
    _run("build_sitemap.py", monkeypatch, str(urls), "-o", str(out), "--changefreq", "daily", "--priority", "0.8")
    with gzip.open(out, "rb") as f:
        xml = f.read().decode("utf-8")
    assert xml.index("<loc>https://example.com/a</loc>") < xml.index("<loc>https://example.com/b</loc>")
    assert xml.count("<changefreq>daily</changefreq>") == 2
    assert "<priority>0.8</priority>" in xml


def test_build_sitemap_over_capacity(tmp_path, monkeypatch, capsys):
    """Too many URLs fails without --split and writes numbered sitemaps with it."""
    urls = tmp_path / "urls.txt"
    urls.write_text("\n".join(f"https://example.com/{n}" for n in range(MAX_SITEMAP_ITEMS + 1)))

    with pytest.raises(SystemExit) as exc_info:
        _run("build_sitemap.py", monkeypatch, str(urls), "-o", str(tmp_path / "sitemap.xml"))
    assert exc_info.value.code == 1
    assert "maximum number of items" in capsys.readouterr().out

    _run("build_sitemap.py", monkeypatch, str(urls), "-o", str(tmp_path / "sitemap.xml"), "--split")
    assert (tmp_path / "sitemap-1.xml").exists()
    assert "<loc>https://example.com/50000</loc>" in (tmp_path / "sitemap-2.xml").read_text()


def test_build_index(tmp_path, monkeypatch):
    """Index lists the sitemaps in the directory but not itself."""
    for name in ("b.xml", "a.xml.gz", "readme.txt", "sitemap-index.xml"):
        (tmp_path / name).write_text("")
    _run("build_index.py", monkeypatch, str(tmp_path), "--prefix", "https://example.com/", "--sort")
    xml = (tmp_path / "sitemap-index.xml").read_text()
    assert xml.index("https://example.com/a.xml.gz") < xml.index("https://example.com/b.xml")
    assert "readme.txt" not in xml
    assert "sitemap-index.xml<" not in xml


def test_build_index_missing_directory(tmp_path, monkeypatch):
    """A missing directory exits with status 1."""
    with pytest.raises(SystemExit) as exc_info:
        _run("build_index.py", monkeypatch, str(tmp_path / "missing"))
    assert exc_info.value.code == 1


def test_build_index_output_elsewhere_keeps_same_name(tmp_path, monkeypatch):
    """A sitemap sharing the index's file name is kept when the index is written elsewhere."""
    scanned = tmp_path / "sitemaps"
    scanned.mkdir()
    (scanned / "sitemap.xml").write_text("")
    (scanned / "news.xml").write_text("")
    public = tmp_path / "public"
    public.mkdir()
    out = public / "sitemap.xml"
    _run("build_index.py", monkeypatch, str(scanned), "--prefix", "https://example.com/", "-o", str(out))
    xml = out.read_text()
    assert "<loc>https://example.com/sitemap.xml</loc>" in xml
    assert "<loc>https://example.com/news.xml</loc>" in xml


@pytest.mark.parametrize("script", ["build_index.py", "build_sitemap.py"])
def test_invalid_settings_exit(script, tmp_path, monkeypatch, capsys):
    """A bad .env value is reported as an error with exit status 1."""
    (tmp_path / ".env").write_text("DEFAULT_PRIORITY=1.5\n")
    (tmp_path / "urls.txt").write_text("https://example.com/\n")
    with pytest.raises(SystemExit) as exc_info:
        _run(script, monkeypatch, str(tmp_path / "urls.txt") if script == "build_sitemap.py" else str(tmp_path))
    assert exc_info.value.code == 1
    assert "Error: invalid configuration" in capsys.readouterr().out
