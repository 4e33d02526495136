"""Content source: resolve an address to the readable text it points at."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import unquote, urlparse

import httpx
from bs4 import BeautifulSoup
from readability import Document

from tldr_cli.constants import DEFAULT_FETCH_TIMEOUT, USER_AGENT
from tldr_cli.errors import FetchError, InvalidArgumentError

LOGGER = logging.getLogger(__name__)

HTML_EXTENSIONS = {".html", ".htm", ".xhtml"}
HTML_CONTENT_TYPES = ("text/html", "application/xhtml+xml")
_BLOCK_TAGS = ["p", "div", "br", "li", "h1", "h2", "h3", "h4", "h5", "h6", "pre", "blockquote"]


@dataclass(frozen=True)
class Content:
    """Readable text extracted from an address.

    Attributes:
        address: The address as given by the caller.
        url: The resolved URL (``file://`` for local files).
        title: The document's own title, if one was found.
        text: The extracted plain text.

    """

    address: str
    url: str
    title: str | None
    text: str


def normalize_address(address: str) -> str:
    """Return ``address`` as an absolute URL, prefixing ``https://`` when needed.

    Raises:
        InvalidArgumentError: If the address is blank.

    """
    address = address.strip()
    if not address:
        msg = "No address given"
        raise InvalidArgumentError(msg)
    parsed = urlparse(address)
    if parsed.scheme in {"http", "https", "file"} and (parsed.netloc or parsed.scheme == "file"):
        return address
    return f"https://{address}"


def extract_text(html: str | bytes) -> tuple[str | None, str]:
    """Return the title and readable body text of an HTML page."""
    try:
        doc = Document(html)
        title = doc.short_title() or None
        summary_html = doc.summary(html_partial=True)
    except Exception as e:
        msg = f"Could not parse HTML: {e}"
        raise FetchError(msg) from e

    soup = BeautifulSoup(summary_html, "html.parser")
    for tag in soup.find_all(_BLOCK_TAGS):
        tag.insert_before("\n")
    lines = (line.strip() for line in soup.get_text().splitlines())
    text = "\n".join(line for line in lines if line)
    return title, text


def _looks_local(address: str) -> bool:
    """Return whether an address names a file on this host rather than a web page."""
    if address.startswith(("file:", "/", "~", "./", "../", "\\")):
        return True
    try:
        return Path(address).exists()
    except OSError:
        return False


def _local_path(address: str) -> Path | None:
    """Return the local file an address refers to, if any."""
    if address.startswith("file://"):
        return Path(unquote(urlparse(address).path))
    path = Path(address).expanduser()
    if path.is_file():
        return path
    return None


def _read_local(address: str, path: Path) -> Content:
    if not path.is_file():
        msg = f"File not found: {path}"
        raise FetchError(msg)
    try:
        raw = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        msg = f"Could not read {path}: {e}"
        raise FetchError(msg) from e

    if path.suffix.lower() in HTML_EXTENSIONS:
        title, text = extract_text(raw)
    else:
        title, text = path.stem, raw
    return Content(address=address, url=path.resolve().as_uri(), title=title, text=text)


async def _fetch_remote(address: str, url: str, client: httpx.AsyncClient) -> Content:
    try:
        response = await client.get(url, headers={"User-Agent": USER_AGENT})
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        msg = f"Fetching {url} failed with HTTP {e.response.status_code}"
        raise FetchError(msg) from e
    except httpx.InvalidURL as e:
        msg = f"Cannot resolve address {address!r}: {e}"
        raise InvalidArgumentError(msg) from e
    except httpx.HTTPError as e:
        msg = f"Fetching {url} failed: {e}"
        raise FetchError(msg) from e

    content_type = response.headers.get("content-type", "").lower()
    if content_type.startswith("text/") and not content_type.startswith(HTML_CONTENT_TYPES):
        title, text = None, response.text
    else:
        title, text = extract_text(response.content)
    return Content(address=address, url=str(response.url), title=title, text=text)


async def fetch_content(
    address: str,
    *,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    client: httpx.AsyncClient | None = None,
    allow_local: bool = True,
) -> Content:
    """Fetch an address and return its extracted plain text.

    Args:
        address: A bare domain, a full URL, a ``file://`` URL or a local path.
        timeout: Request timeout in seconds, used when no client is given.
        client: Optional HTTP client, used as-is.
        allow_local: Whether files on this host may be read. When false,
            local paths and ``file://`` URLs are rejected.

    Raises:
        InvalidArgumentError: If the address is blank, not a valid URL, or
            names a local file while ``allow_local`` is false.
        FetchError: If retrieval fails, the response is not 2xx, or no
            readable text could be extracted.

    """
    address = address.strip()
    if not address:
        msg = "No address given"
        raise InvalidArgumentError(msg)

    if not allow_local and _looks_local(address):
        msg = f"Local files cannot be summarized here: {address}"
        raise InvalidArgumentError(msg)

    path = _local_path(address) if allow_local else None
    if path is not None:
        LOGGER.info("Reading local file %s", path)
        content = _read_local(address, path)
    else:
        url = normalize_address(address)
        LOGGER.info("Fetching %s", url)
        if client is not None:
            content = await _fetch_remote(address, url, client)
        else:
            async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as owned:
                content = await _fetch_remote(address, url, owned)

    if not content.text.strip():
        msg = f"No readable content found at {content.url}"
        raise FetchError(msg)
    LOGGER.info("Extracted %d chars from %s", len(content.text), content.url)
    return content
