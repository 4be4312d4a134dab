"""Tests for ``odoo_setup.fetch`` against a local HTTP server."""

import functools
import threading
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

import aiohttp
import pytest

from odoo_setup.fetch import DOWNLOAD_ERRORS, download_file, raw_file_url


class _QuietHandler(SimpleHTTPRequestHandler):
    def log_message(self, format, *args):  # noqa: A002
        pass


@pytest.fixture
def http_root(tmp_path: Path):
    """Serve ``tmp_path / 'www'`` over HTTP and yield ``(root_dir, base_url)``."""
    root = tmp_path / "www"
    root.mkdir()
    handler = functools.partial(_QuietHandler, directory=str(root))
    server = ThreadingHTTPServer(("127.0.0.1", 0), handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield root, f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()


def test_raw_file_url():
    assert (
        raw_file_url("https://raw.githubusercontent.com/odoo/odoo/", "18.0", "requirements.txt")
        == "https://raw.githubusercontent.com/odoo/odoo/18.0/requirements.txt"
    )


def test_download_file_writes_body(http_root, tmp_path: Path):
    root, base = http_root
    (root / "18.0").mkdir()
    (root / "18.0" / "requirements.txt").write_text("lxml==5.2.1\n", encoding="utf-8")
    dest = tmp_path / "requirements.txt"
    assert download_file(raw_file_url(base, "18.0", "requirements.txt"), dest) == dest
    assert dest.read_text(encoding="utf-8") == "lxml==5.2.1\n"
    assert not (tmp_path / "requirements.txt.part").exists()


def test_download_file_404_leaves_no_file(http_root, tmp_path: Path):
    _root, base = http_root
    dest = tmp_path / "missing.txt"
    with pytest.raises(aiohttp.ClientResponseError) as info:
        download_file(f"{base}/missing.txt", dest)
    assert info.value.status == 404
    assert isinstance(info.value, DOWNLOAD_ERRORS)
    assert not dest.exists()
    assert not (tmp_path / "missing.txt.part").exists()
