"""HTTP download of single files.

The installer downloads two kinds of files: the raw ``requirements.txt`` of an
Odoo branch and the prebuilt libsass wheel used by the dependency fallback.
Downloads use aiohttp, driven to completion with ``asyncio.run`` so callers
stay synchronous. The body is streamed to a ``.part`` file that is renamed
into place only once complete, so a failed download never leaves a truncated
file under the final name.

Examples
--------
>>> from pathlib import Path
>>> from odoo_setup.fetch import download_file
>>> download_file("https://example.com/requirements.txt", Path("requirements.txt"))  # doctest: +SKIP
PosixPath('requirements.txt')
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import aiohttp

from odoo_setup.config import DOWNLOAD_CHUNK_SIZE

logger = logging.getLogger(__name__)

# Exceptions callers translate into their own domain errors.
DOWNLOAD_ERRORS: tuple[type[BaseException], ...] = (
    aiohttp.ClientError,
    asyncio.TimeoutError,
    OSError,
)


async def _download(url: str, dest: Path) -> None:
    partial = dest.with_name(dest.name + ".part")
    timeout = aiohttp.ClientTimeout(total=None)
    try:
        async with aiohttp.ClientSession(timeout=timeout, raise_for_status=True) as session:
            async with session.get(url) as response:
                with partial.open("wb") as handle:
                    async for chunk in response.content.iter_chunked(DOWNLOAD_CHUNK_SIZE):
                        handle.write(chunk)
        partial.replace(dest)
    finally:
        if partial.exists():
            partial.unlink()


def download_file(url: str, dest: Path) -> Path:
    r"""Download ``url`` to ``dest`` and return ``dest``.

    Parameters
    ----------
    url : str
        HTTP(S) URL of the file.
    dest : Path
        Target file path. Its parent directory must exist; an existing file is
        replaced.

    Returns
    -------
    Path
        ``dest``.

    Raises
    ------
    aiohttp.ClientError
        On connection failures and non-2xx responses.
    OSError
        If the file cannot be written.
    """
    logger.info(f"Downloading {url} -> {dest}")
    asyncio.run(_download(url, dest))
    logger.info(f"Downloaded {dest} ({dest.stat().st_size} bytes)")
    return dest


def raw_file_url(base_url: str, branch: str, filename: str) -> str:
    """Return the raw-content URL of ``filename`` on ``branch``."""
    return f"{base_url.rstrip('/')}/{branch}/{filename}"


__all__ = ["DOWNLOAD_ERRORS", "download_file", "raw_file_url"]
