"""
URL Discovery
=============

Breadth-first, same-hostname crawl from one seed URL, bounded by a page cap.
All crawl state (queue, visited set, discovered set) lives on a
``CrawlSession`` so concurrent audits never share anything.
"""

import asyncio
import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urldefrag, urljoin, urlsplit, urlunsplit

from loguru import logger

from siteaudit.web.fetcher import Fetcher, FetchFailure
from siteaudit.web.parser import ParsedPage

SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")

ALLOWED_SCHEMES = ("http", "https")


def normalize_url(url: str) -> str:
    """
    Canonical form used for crawling and deduplication.

    Defaults the scheme to https, lowercases scheme and host, turns an empty
    path into ``/`` and drops the fragment.

    Raises:
        ValueError: If the URL has no host or is not http(s)
    """
    candidate = (url or "").strip()
    if not candidate:
        raise ValueError("URL is empty")
    if not SCHEME_PATTERN.match(candidate):
        candidate = "https://" + candidate

    parts = urlsplit(candidate)
    scheme = parts.scheme.lower()
    if scheme not in ALLOWED_SCHEMES:
        raise ValueError(f"Unsupported URL scheme: {parts.scheme}")
    if not parts.hostname:
        raise ValueError(f"URL has no host: {url}")
    # Raises ValueError on a malformed port
    parts.port

    return urlunsplit((scheme, parts.netloc.lower(), parts.path or "/", parts.query, ""))


@dataclass(frozen=True)
class CrawlTarget:
    """Seed URL and the hostname every discovered URL must share."""
    seed_url: str
    hostname: str

    @classmethod
    def from_url(cls, url: str) -> "CrawlTarget":
        seed_url = normalize_url(url)
        return cls(seed_url=seed_url, hostname=urlsplit(seed_url).hostname)

    def resolve(self, href: str, base_url: str) -> Optional[str]:
        """Absolute, normalized same-host URL for ``href``, or None."""
        href = (href or "").strip()
        if not href:
            return None
        try:
            absolute, _ = urldefrag(urljoin(base_url, href))
            if urlsplit(absolute).scheme.lower() not in ALLOWED_SCHEMES:
                return None
            link = normalize_url(absolute)
        except ValueError:
            return None
        if urlsplit(link).hostname != self.hostname:
            return None
        return link


class CrawlSession:
    """
    One bounded discovery run.

    The discovered set is capped at ``max_pages`` and always starts with
    the seed. Fetch failures are logged and skipped; they never end the crawl.
    """

    def __init__(
        self,
        target: CrawlTarget,
        fetcher: Fetcher,
        max_pages: Optional[int] = None,
        concurrency: Optional[int] = None,
        timeout: Optional[float] = None,
    ):
        settings = fetcher.settings
        self.target = target
        self.fetcher = fetcher
        self.max_pages = max_pages or settings.max_pages
        self.concurrency = concurrency or settings.concurrency
        self.timeout = timeout or settings.discovery_timeout

        # Guards _discovered and _visited across workers
        self._lock = asyncio.Lock()
        self._discovered: dict[str, None] = {target.seed_url: None}
        self._visited: set[str] = set()
        self.failed_urls: list[str] = []

    @property
    def discovered(self) -> list[str]:
        return list(self._discovered)

    @property
    def visited(self) -> set[str]:
        return set(self._visited)

    def _is_full(self) -> bool:
        return len(self._discovered) >= self.max_pages

    async def discover(self) -> list[str]:
        """Run the crawl and return discovered URLs in insertion order."""
        queue: asyncio.Queue = asyncio.Queue()
        queue.put_nowait(self.target.seed_url)

        workers = [asyncio.create_task(self._worker(queue)) for _ in range(self.concurrency)]
        try:
            await queue.join()
        finally:
            for worker in workers:
                worker.cancel()
            await asyncio.gather(*workers, return_exceptions=True)

        logger.info(
            "Discovered {} URL(s) on {} ({} fetch failure(s))",
            len(self._discovered), self.target.hostname, len(self.failed_urls),
        )
        return self.discovered

    async def _worker(self, queue: asyncio.Queue) -> None:
        while True:
            url = await queue.get()
            try:
                await self._visit(url, queue)
            except Exception:
                logger.exception("Unexpected error discovering links on {}", url)
                self.failed_urls.append(url)
            finally:
                queue.task_done()

    async def _visit(self, url: str, queue: asyncio.Queue) -> None:
        async with self._lock:
            if url in self._visited or self._is_full():
                return
            self._visited.add(url)

        try:
            response = await self.fetcher.fetch(url, timeout=self.timeout)
        except FetchFailure as e:
            logger.warning("Failed to fetch {}: {}", url, e)
            self.failed_urls.append(url)
            return

        content_type = response.header("content-type") or ""
        if content_type and "html" not in content_type.lower():
            return

        links = []
        for href, _ in ParsedPage(response.body).anchors():
            link = self.target.resolve(href, url)
            if link is not None:
                links.append(link)

        async with self._lock:
            for link in links:
                if self._is_full():
                    break
                if link in self._discovered or link in self._visited:
                    continue
                self._discovered[link] = None
                queue.put_nowait(link)
