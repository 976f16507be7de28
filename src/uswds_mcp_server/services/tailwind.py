"""Documentation lookups against the USWDS Tailwind site.

Pages are fetched with :mod:`httpx`, parsed with BeautifulSoup and kept in a
small in-memory cache so repeated tool calls do not hit the site again.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable

import httpx
from bs4 import BeautifulSoup, Tag

from uswds_mcp_server.config import SERVER_VERSION
from uswds_mcp_server.data.components import TAILWIND_USWDS_URL, component_slug
from uswds_mcp_server.errors import UpstreamError

logger = logging.getLogger(__name__)

SOURCE = "uswds-tailwind"
USER_AGENT = f"USWDS-MCP-Server/{SERVER_VERSION}"
EXCERPT_LENGTH = 150
SECTION_HEADINGS = ("h2", "h3")

# (section title, path, response type) for the pages covered by search_docs.
DOC_PAGES: tuple[tuple[str, str, str], ...] = (
    ("Getting Started", "getting-started", "getting-started"),
    ("JavaScript", "javascript", "javascript"),
    ("Colors", "colors", "colors"),
    ("Icons", "icons", "icons"),
    ("Typography", "typography", "typography"),
)


@dataclass
class _CachedPage:
    html: str
    fetched_at: float


def parse_documentation(html: str, url: str) -> dict[str, Any]:
    """Extract title, text, headed sections and code blocks from a page."""
    soup = BeautifulSoup(html, "html.parser")

    h1 = soup.find("h1")
    title = h1.get_text(strip=True) if h1 else ""
    if not title and soup.title:
        title = soup.title.get_text(strip=True)

    doc: dict[str, Any] = {"url": url, "title": title or "Untitled"}
    main = soup.select_one("main, article, .content, #content")
    if main is None:
        body = soup.body or soup
        doc["content"] = body.get_text("\n", strip=True)
        return doc

    doc["content"] = main.get_text("\n", strip=True)
    sections: list[dict[str, Any]] = []
    for heading in main.find_all(SECTION_HEADINGS):
        lines = []
        for sibling in heading.find_next_siblings():
            if sibling.name in SECTION_HEADINGS:
                break
            lines.append(sibling.get_text(" ", strip=True))
        sections.append(
            {
                "title": heading.get_text(strip=True),
                "level": heading.name,
                "content": "\n".join(line for line in lines if line),
            }
        )
    for block in main.find_all("pre"):
        code = block.get_text().strip()
        if code:
            sections.append({"type": "code", "content": code})
    if sections:
        doc["sections"] = sections
    return doc


def extract_excerpt(content: str, query: str, length: int = EXCERPT_LENGTH) -> str:
    """Return roughly ``length`` characters of ``content`` around ``query``."""
    index = content.lower().find(query.lower())
    if index == -1:
        return content[:length] + "..."

    start = max(0, index - length // 2)
    end = min(len(content), index + len(query) + length // 2)
    excerpt = content[start:end]
    if start > 0:
        excerpt = "..." + excerpt
    if end < len(content):
        excerpt += "..."
    return excerpt


class TailwindUSWDSService:
    """Fetch and summarize documentation pages from USWDS Tailwind.

    Args:
        base_url: Root of the documentation site.
        timeout: Per-request timeout in seconds.
        cache_ttl: Seconds a fetched page is reused before refetching.
        transport: Optional httpx transport, used by tests to serve canned pages.
        clock: Monotonic time source for cache expiry.
    """

    def __init__(
        self,
        base_url: str = TAILWIND_USWDS_URL,
        *,
        timeout: float = 10.0,
        cache_ttl: float = 3600.0,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._cache_ttl = cache_ttl
        self._transport = transport
        self._clock = clock
        self._pages: dict[str, _CachedPage] = {}

    async def _fetch(self, url: str) -> str:
        now = self._clock()
        cached = self._pages.get(url)
        if cached is not None and now - cached.fetched_at < self._cache_ttl:
            return cached.html

        logger.debug("Fetching %s", url)
        async with httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            timeout=self._timeout,
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            response = await client.get(url)
            response.raise_for_status()

        self._pages[url] = _CachedPage(html=response.text, fetched_at=now)
        return response.text

    async def _page(self, path: str, label: str, doc_type: str) -> dict[str, Any]:
        url = f"{self.base_url}/{path}"
        try:
            html = await self._fetch(url)
        except httpx.HTTPError as error:
            raise UpstreamError(
                f"Failed to fetch {label} documentation: {error}", {"url": url}
            ) from error
        return {"source": SOURCE, "type": doc_type, **parse_documentation(html, url)}

    async def get_getting_started(self) -> dict[str, Any]:
        """Installation and setup guide."""
        return await self._page("getting-started", "Getting Started", "getting-started")

    async def get_javascript_docs(self) -> dict[str, Any]:
        """Documentation for the interactive component scripts."""
        return await self._page("javascript", "JavaScript", "javascript")

    async def get_colors_docs(self) -> dict[str, Any]:
        return await self._page("colors", "colors", "colors")

    async def get_icons_docs(self) -> dict[str, Any]:
        return await self._page("icons", "icons", "icons")

    async def get_typography_docs(self) -> dict[str, Any]:
        return await self._page("typography", "typography", "typography")

    async def get_component_docs(self, name: str | None = None) -> dict[str, Any]:
        """Documentation for one component, or the component index without a name."""
        if not name:
            return await self._component_index()

        doc = await self._page(
            f"components/{component_slug(name)}", f'component "{name}"', "component"
        )
        doc["componentName"] = name
        return doc

    async def list_components(self, category: str | None = None) -> dict[str, Any]:
        """List every documented component.

        The site has no categories, so ``category`` is echoed back but does not
        filter the listing.
        """
        listing = await self._component_index()
        if category and category != "all":
            listing["category"] = category
            listing["note"] = "USWDS Tailwind does not group components by category"
        return listing

    async def _component_index(self) -> dict[str, Any]:
        url = f"{self.base_url}/components"
        try:
            html = await self._fetch(url)
        except httpx.HTTPError as error:
            raise UpstreamError(
                f"Failed to fetch components list: {error}", {"url": url}
            ) from error

        soup = BeautifulSoup(html, "html.parser")
        components: dict[str, dict[str, str]] = {}
        for link in soup.select('a[href^="/components/"]'):
            if not isinstance(link, Tag):
                continue
            href = str(link.get("href", "")).rstrip("/")
            text = link.get_text(strip=True)
            slug = href.removeprefix("/components/")
            if text and slug and "/" not in slug:
                components.setdefault(
                    slug, {"name": text, "slug": slug, "url": f"{self.base_url}{href}"}
                )
        return {
            "source": SOURCE,
            "type": "component-list",
            "url": url,
            "total": len(components),
            "components": list(components.values()),
        }

    async def search_docs(self, query: str) -> dict[str, Any]:
        """Search the guide pages for ``query``.

        A page that cannot be fetched is logged and skipped so the remaining
        pages are still searched.
        """
        needle = query.lower()
        results = []
        for label, path, doc_type in DOC_PAGES:
            try:
                doc = await self._page(path, label, doc_type)
            except UpstreamError as error:
                logger.warning(
                    "Skipping %s while searching: %s (%s)", label, error, error.details
                )
                continue

            title_match = needle in doc["title"].lower()
            if title_match or needle in doc["content"].lower():
                results.append(
                    {
                        "section": label,
                        "title": doc["title"],
                        "url": doc["url"],
                        "relevance": "high" if title_match else "medium",
                        "excerpt": extract_excerpt(doc["content"], query),
                    }
                )
        return {
            "source": SOURCE,
            "query": query,
            "total": len(results),
            "results": results,
        }
