"""Collect stylesheets from files, directories, and live pages."""

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import urljoin, urlparse

import httpx
from bs4 import BeautifulSoup

from . import __version__
from .errors import FetchError, SourceNotFoundError
from .models import StyleSource

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": f"css-audit/{__version__}",
    "Accept": "text/html,application/xhtml+xml,text/css;q=0.9,*/*;q=0.8",
}

SKIP_DIRS = {"node_modules"}


def find_css_files(root: Path) -> list[Path]:
    """Find .css files under root, skipping hidden and dependency dirs."""
    files: list[Path] = []
    for entry in sorted(root.iterdir()):
        if entry.is_dir():
            if entry.name.startswith(".") or entry.name in SKIP_DIRS:
                continue
            files.extend(find_css_files(entry))
        elif entry.is_file() and entry.name.endswith(".css"):
            files.append(entry)
    return files


def read_source(path: Path, name: str) -> StyleSource:
    return StyleSource(name, path.read_text(encoding="utf-8", errors="replace"))


def collect_from_path(path: str | Path) -> list[StyleSource]:
    """Collect a single CSS file, or every CSS file in a directory tree.

    Directory entries are named relative to the directory; a single file
    is named by its base name.

    Raises:
        SourceNotFoundError: if the path does not exist
    """
    path = Path(path).resolve()
    if not path.exists():
        raise SourceNotFoundError(path)

    if path.is_dir():
        return [
            read_source(f, f.relative_to(path).as_posix())
            for f in find_css_files(path)
        ]
    return [read_source(path, path.name)]


def normalize_url(url: str) -> str:
    """Ensure URL has a scheme."""
    if not url.startswith(("http://", "https://")):
        url = "https://" + url
    return url


def is_url(value: str) -> bool:
    return value.startswith(("http://", "https://"))


def resolve_stylesheet_url(href: str, page_url: str) -> str:
    """Resolve a stylesheet href against the page it was found on."""
    if href.startswith("//"):
        return "https:" + href
    return urljoin(page_url, href)


def extract_stylesheets(html: str) -> tuple[list[StyleSource], list[str]]:
    """Find inline <style> bodies and linked stylesheet hrefs in a page.

    Returns:
        (inline sources named inline-style-N, unique hrefs in document order)
    """
    soup = BeautifulSoup(html, "lxml")

    inline = [
        StyleSource(f"inline-style-{i}", tag.get_text())
        for i, tag in enumerate(soup.find_all("style"), 1)
    ]

    hrefs: list[str] = []
    for link in soup.find_all("link", href=True):
        rel = link.get("rel") or []
        if isinstance(rel, str):
            rel = rel.split()
        if "stylesheet" not in (r.lower() for r in rel):
            continue
        href = link["href"].strip()
        if href and href not in hrefs:
            hrefs.append(href)

    return inline, hrefs


def fetch_text(client: httpx.Client, url: str) -> httpx.Response:
    """GET a URL, translating transport and status errors to FetchError."""
    try:
        response = client.get(url, follow_redirects=True)
        response.raise_for_status()
    except httpx.TimeoutException as e:
        raise FetchError(url, "Timeout") from e
    except httpx.HTTPStatusError as e:
        raise FetchError(url, f"HTTP {e.response.status_code}") from e
    except httpx.RequestError as e:
        raise FetchError(url, f"Request failed: {e}") from e
    logger.debug("Fetched %s (%d bytes)", response.url, len(response.content))
    return response


def is_stylesheet_response(response: httpx.Response) -> bool:
    content_type = response.headers.get("content-type", "")
    return "text/css" in content_type or urlparse(str(response.url)).path.endswith(".css")


def collect_from_url(
    url: str,
    client: Optional[httpx.Client] = None,
    timeout: float = 30.0,
) -> list[StyleSource]:
    """Collect the CSS of a live page (or of a stylesheet URL).

    Linked stylesheets that cannot be fetched are logged and skipped.

    Args:
        url: Page or stylesheet URL; https:// is assumed when no scheme is given
        client: Optional httpx client to reuse
        timeout: Request timeout in seconds

    Raises:
        FetchError: if the page itself cannot be retrieved
    """
    url = normalize_url(url)

    if client is None:
        with httpx.Client(
            headers=DEFAULT_HEADERS,
            timeout=timeout,
            follow_redirects=True
        ) as owned:
            return collect_from_url(url, owned, timeout)

    response = fetch_text(client, url)
    final_url = str(response.url)

    if is_stylesheet_response(response):
        return [StyleSource(url, response.text)]

    sources, hrefs = extract_stylesheets(response.text)

    for href in hrefs:
        css_url = resolve_stylesheet_url(href, final_url)
        try:
            sheet = fetch_text(client, css_url)
        except FetchError as e:
            logger.warning("Skipping stylesheet %s: %s", href, e.reason)
            continue
        sources.append(StyleSource(href, sheet.text))

    return sources
