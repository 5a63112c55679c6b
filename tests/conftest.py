"""Shared fixtures: an in-memory fetcher and sample pages."""

import asyncio

import pytest

from siteaudit.config import Settings
from siteaudit.web.fetcher import FailureReason, FetchedPage, FetchFailure

GOOD_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <title>Acme Widgets - Durable widgets for every workshop</title>
  <meta name="description" content="Acme builds durable, affordable widgets for workshops of every size. Browse the catalogue, compare models and order online with free shipping today.">
  <meta property="og:title" content="Acme Widgets">
  <meta property="og:description" content="Durable widgets">
  <meta property="og:image" content="https://example.com/og.png">
  <meta property="og:url" content="https://example.com/">
  <meta name="twitter:card" content="summary">
  <script type="application/ld+json">{"@context": "https://schema.org", "@type": "Organization", "name": "Acme"}</script>
</head>
<body>
  <header><nav class="breadcrumb"><a href="/">Home page</a></nav></header>
  <main>
    <article itemscope itemtype="https://schema.org/Product">
      <h1>Durable widgets</h1>
      <section>
        <h2>Why choose our widgets</h2>
        <p>Our widgets are tested in real workshops before they ever reach a customer. Every model ships with a clear manual and a generous warranty.</p>
        <ul><li>Steel frame</li><li>Lifetime support</li></ul>
        <img src="/widget.png" alt="A steel widget">
      </section>
    </article>
    <aside><a href="/catalogue">Full catalogue</a> <a href="/pricing">Pricing plans</a> <a href="/about">About the company</a> <a href="/contact">Contact support</a></aside>
  </main>
  <footer>Made by Acme.</footer>
</body>
</html>
"""


def html_page(body: str = "", head: str = "", doctype: bool = True, lang: str = "en") -> str:
    """Build a minimal HTML document around ``body``."""
    lang_attr = f' lang="{lang}"' if lang else ""
    prefix = "<!DOCTYPE html>\n" if doctype else ""
    return f"{prefix}<html{lang_attr}><head>{head}</head><body>{body}</body></html>"


class FakeFetcher:
    """
    Stands in for ``Fetcher``.

    ``responses`` maps URL to a body string, a FetchedPage, a FetchFailure,
    or a list of those consumed one per call (the last one repeats).
    Unknown URLs fail with a 404.
    """

    def __init__(self, responses=None, settings=None, delays=None):
        self.settings = settings or Settings()
        self.responses = dict(responses or {})
        self.delays = dict(delays or {})
        self.calls = []

    def __call__(self, settings):
        self.settings = settings
        return self

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return None

    async def fetch(self, url, timeout=None):
        self.calls.append(url)

        delay = self.delays.get(url, 0)
        if delay:
            if timeout is not None and delay > timeout:
                await asyncio.sleep(timeout)
                raise FetchFailure(url, FailureReason.TIMEOUT, f"no response within {timeout}s")
            await asyncio.sleep(delay)

        response = self.responses.get(url)
        if isinstance(response, list):
            response = response.pop(0) if len(response) > 1 else response[0]

        if response is None:
            raise FetchFailure(url, FailureReason.HTTP_STATUS, "status 404", status=404)
        if isinstance(response, FetchFailure):
            raise response
        if isinstance(response, str):
            return FetchedPage(
                url=url,
                status=200,
                body=response,
                headers={"content-type": "text/html; charset=utf-8"},
                elapsed_ms=120.0,
                final_url=url,
            )
        return response


@pytest.fixture
def settings():
    return Settings(
        page_timeout=1.0,
        auxiliary_timeout=0.5,
        discovery_timeout=0.5,
        max_pages=10,
        concurrency=3,
        crawl_deadline=10.0,
    )


@pytest.fixture
def fake_fetcher(settings):
    return FakeFetcher(settings=settings)
