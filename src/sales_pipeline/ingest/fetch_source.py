"""Utilities to read the raw sales export from a local path or a URL."""

from __future__ import annotations

import logging
from pathlib import Path

from sales_pipeline.errors import IngestionError

log = logging.getLogger(__name__)

REMOTE_SCHEMES = ("http://", "https://")


def is_remote(source: str | Path) -> bool:
    """Return True when `source` is an http(s) URL rather than a local path."""
    return isinstance(source, str) and source.lower().startswith(REMOTE_SCHEMES)


def read_source_text(
    source: str | Path,
    encoding: str = "utf-8",
    timeout: float = 30.0,
) -> str:
    """Return the full text of the sales export.

    Args:
        source: Local file path or http(s) URL.
        encoding: Text encoding used to decode the file.
        timeout: Request timeout in seconds (remote sources only).

    Returns:
        The decoded file contents.

    Raises:
        IngestionError: if the file is missing or unreadable, cannot be
            decoded, or the remote request fails (including non-2xx status).
    """
    if is_remote(source):
        return _fetch_remote(str(source), encoding, timeout)

    path = Path(source)
    log.info("Reading %s", path)
    try:
        text = path.read_text(encoding=encoding)
    except FileNotFoundError as exc:
        raise IngestionError(f"Sales file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise IngestionError(f"Unable to read sales file {path}: {exc}") from exc

    log.info("Read %s (%d characters)", path, len(text))
    return text


def _fetch_remote(url: str, encoding: str, timeout: float) -> str:
    """GET `url` and decode the body with `encoding`."""
    log.info("Downloading %s", url)
    import requests  # type: ignore[import-untyped]  # local import to avoid requiring type stubs at module import
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as exc:
        raise IngestionError(f"Failed to fetch {url}: {exc}") from exc

    try:
        text = r.content.decode(encoding)
    except UnicodeDecodeError as exc:
        raise IngestionError(f"Unable to decode {url} as {encoding}: {exc}") from exc

    log.info("Downloaded %s (%d bytes)", url, len(r.content))
    return text
