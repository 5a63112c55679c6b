"""
HTTP Fetcher
============

Single bounded GET requests with a fixed user agent, per-call timeout and a
redirect cap. There is no retry policy: a failed fetch is reported to the
caller as a ``FetchFailure`` and the caller decides what "no data" means.
"""

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import aiohttp
from loguru import logger

from siteaudit.config import Settings, get_settings


class FailureReason(Enum):
    """Why a fetch produced no usable response."""
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    TOO_MANY_REDIRECTS = "too_many_redirects"
    CONNECTION = "connection"
    INVALID_URL = "invalid_url"


class FetchFailure(Exception):
    """A single fetch failed; the URL contributes no data."""

    def __init__(self, url: str, reason: FailureReason, message: str = "", status: Optional[int] = None):
        self.url = url
        self.reason = reason
        self.message = message
        self.status = status
        super().__init__(f"{reason.value}: {url}" + (f" ({message})" if message else ""))


@dataclass(frozen=True)
class FetchedPage:
    """A successful response, owned by whoever requested it."""
    url: str
    status: int
    body: str
    headers: dict = field(default_factory=dict)
    elapsed_ms: float = 0.0
    final_url: str = ""

    @property
    def size(self) -> int:
        """Body size in bytes."""
        return len(self.body.encode("utf-8"))

    def header(self, name: str) -> Optional[str]:
        return self.headers.get(name.lower())


class Fetcher:
    """
    Thin wrapper around one ``aiohttp.ClientSession``.

    Use as an async context manager; the session is shared by every fetch
    of one audit and closed when the audit ends.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def default_headers(self) -> dict:
        return {
            "User-Agent": self.settings.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        }

    async def __aenter__(self) -> "Fetcher":
        self._session = aiohttp.ClientSession(headers=self.default_headers)
        return self

    async def __aexit__(self, *exc_info) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def fetch(self, url: str, timeout: Optional[float] = None) -> FetchedPage:
        """
        Fetch ``url`` once.

        Args:
            url: Absolute URL to request
            timeout: Total timeout in seconds (defaults to the page timeout)

        Returns:
            FetchedPage for any 2xx response

        Raises:
            FetchFailure: On timeout, transport error, redirect overflow or non-2xx status
        """
        if self._session is None:
            raise RuntimeError("Fetcher must be used inside 'async with'")

        timeout = timeout if timeout is not None else self.settings.page_timeout
        loop = asyncio.get_running_loop()
        start_time = loop.time()

        try:
            async with self._session.get(
                url,
                allow_redirects=True,
                max_redirects=self.settings.max_redirects,
                timeout=aiohttp.ClientTimeout(total=timeout),
            ) as response:
                body = await response.text(errors="replace")
                elapsed_ms = (loop.time() - start_time) * 1000
                status = response.status
                headers = {key.lower(): value for key, value in response.headers.items()}
                final_url = str(response.url)
        except aiohttp.TooManyRedirects as e:
            raise FetchFailure(url, FailureReason.TOO_MANY_REDIRECTS, str(e)) from e
        except aiohttp.InvalidURL as e:
            raise FetchFailure(url, FailureReason.INVALID_URL, str(e)) from e
        except asyncio.TimeoutError as e:
            raise FetchFailure(url, FailureReason.TIMEOUT, f"no response within {timeout}s") from e
        except aiohttp.ClientError as e:
            raise FetchFailure(url, FailureReason.CONNECTION, str(e)) from e

        if not 200 <= status < 300:
            raise FetchFailure(url, FailureReason.HTTP_STATUS, f"status {status}", status=status)

        logger.debug("Fetched {} ({} in {:.0f}ms)", url, status, elapsed_ms)
        return FetchedPage(
            url=url,
            status=status,
            body=body,
            headers=headers,
            elapsed_ms=elapsed_ms,
            final_url=final_url,
        )
