"""
Open Library search integration
https://openlibrary.org/dev/docs/api/search

Parses the inline `field:value` query syntax, forwards a single request to
Open Library and maps each returned document onto the book record shape.
"""
import asyncio
import logging
import re
import time
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

import aiohttp

from bookshelf.config import Settings, get_settings
from bookshelf.exceptions import UpstreamServiceError
from bookshelf.models.book import ReadingStatus
from bookshelf.models.timestamps import format_timestamp, utcnow

logger = logging.getLogger(__name__)

KEYWORD_PATTERN = re.compile(r"(\w+):(\S+)")

SEARCH_FIELDS = "key,title,author_name,isbn,publish_year,publisher,number_of_pages_median,first_sentence,cover_i"

COVERS_URL = "https://covers.openlibrary.org"
WORK_KEY_PREFIX = "/works/"
UNKNOWN_AUTHOR = "Unknown Author"
UNKNOWN_TITLE = "Unknown Title"


def parse_search_query(query: str) -> Tuple[str, Dict[str, str]]:
    """Split "author:Sanderson way of kings" into free text and field filters"""
    filters: Dict[str, str] = {}
    for match in KEYWORD_PATTERN.finditer(query):
        filters[match.group(1).lower()] = match.group(2)
    free_text = KEYWORD_PATTERN.sub("", query)
    free_text = re.sub(r"\s+", " ", free_text).strip()
    return free_text, filters


def build_provider_query(free_text: str, filters: Dict[str, str]) -> str:
    """Render recognized filters as Open Library field clauses joined with AND"""
    parts: List[str] = []
    if filters.get("author"):
        parts.append(f'author:"{filters["author"]}"')
    if filters.get("title"):
        parts.append(f'title:"{filters["title"]}"')
    if filters.get("isbn"):
        parts.append(f"isbn:{filters['isbn']}")
    if filters.get("publisher"):
        parts.append(f'publisher:"{filters["publisher"]}"')
    if filters.get("year"):
        parts.append(f"publish_year:{filters['year']}")
    if free_text:
        parts.append(free_text)
    return " AND ".join(parts)


def _first(values: Optional[List[Any]]) -> Any:
    return values[0] if values else None


def transform_search_result(
    doc: Dict[str, Any],
    now: Optional[datetime] = None,
    covers_url: str = COVERS_URL,
) -> Dict[str, Any]:
    """Map an Open Library search document onto the book record shape"""
    isbn_10 = None
    isbn_13 = None
    for isbn in doc.get("isbn") or []:
        clean = re.sub(r"[-\s]", "", isbn)
        if len(clean) == 10 and not isbn_10:
            isbn_10 = clean
        elif len(clean) == 13 and not isbn_13:
            isbn_13 = clean

    publish_years = doc.get("publish_year") or []
    cover_id = doc.get("cover_i")
    key = doc.get("key")

    return {
        "title": doc.get("title") or UNKNOWN_TITLE,
        "author": _first(doc.get("author_name")) or UNKNOWN_AUTHOR,
        "isbn_10": isbn_10,
        "isbn_13": isbn_13,
        "publication_year": max(publish_years) if publish_years else None,
        "publisher": _first(doc.get("publisher")),
        "page_count": doc.get("number_of_pages_median") or None,
        "description": _first(doc.get("first_sentence")),
        "cover_image_url": f"{covers_url}/b/id/{cover_id}-L.jpg" if cover_id else None,
        "open_library_id": key.replace(WORK_KEY_PREFIX, "") if key else None,
        "series_id": None,
        "status": ReadingStatus.PLANNING.value,
        "rating": None,
        "comments": None,
        "book_type": None,
        "date_added": format_timestamp(now or utcnow()),
        "date_started": None,
        "date_finished": None,
    }


class OpenLibraryClient:
    """
    Client for the Open Library search API
    Free, no API key required. One attempt per call, no retries.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.base_url = self.settings.OPEN_LIBRARY_URL.rstrip("/")
        self.covers_url = self.settings.OPEN_LIBRARY_COVERS_URL.rstrip("/")
        timeout = self.settings.OPEN_LIBRARY_TIMEOUT
        self.timeout = aiohttp.ClientTimeout(total=timeout) if timeout else None

    def clamp_limit(self, limit: int) -> int:
        return max(0, min(limit, self.settings.SEARCH_MAX_LIMIT))

    async def search(self, query: str, limit: int = 10, offset: int = 0) -> Dict[str, Any]:
        """
        Search Open Library

        Args:
            query: raw user query, may contain field:value tokens
            limit: page size, capped at SEARCH_MAX_LIMIT
            offset: number of results to skip

        Returns:
            Dict with results, total, offset and limit

        Raises:
            UpstreamServiceError: non-success status or transport failure
        """
        free_text, filters = parse_search_query(query)
        params = {
            "q": build_provider_query(free_text, filters),
            "limit": str(self.clamp_limit(limit)),
            "offset": str(offset),
            "fields": SEARCH_FIELDS,
        }
        data = await self._make_request("/search.json", params)

        now = utcnow()
        results = [
            transform_search_result(doc, now=now, covers_url=self.covers_url)
            for doc in data.get("docs", [])
        ]
        return {
            "results": results,
            "total": data.get("numFound", 0),
            "offset": data.get("start", offset),
            "limit": len(results),
        }

    async def _make_request(self, endpoint: str, params: Dict[str, str]) -> Dict[str, Any]:
        """GET an Open Library endpoint and decode its JSON body"""
        url = f"{self.base_url}{endpoint}"
        headers = {"User-Agent": self.settings.OPEN_LIBRARY_USER_AGENT}
        logger.info(f"Outgoing Open Library call: {url} q={params.get('q')!r}")
        start = time.monotonic()
        try:
            session_kwargs = {"timeout": self.timeout} if self.timeout else {}
            async with aiohttp.ClientSession(**session_kwargs) as session:
                async with session.get(url, params=params, headers=headers) as response:
                    duration_ms = int((time.monotonic() - start) * 1000)
                    logger.info(f"Open Library call completed: HTTP {response.status} in {duration_ms}ms")
                    if not 200 <= response.status < 300:
                        logger.error(f"Open Library API error: HTTP {response.status}")
                        raise UpstreamServiceError(
                            f"Open Library API error: {response.status}", status=response.status
                        )
                    return await response.json()
        except asyncio.TimeoutError as e:
            logger.error("Open Library API timeout")
            raise UpstreamServiceError("Open Library API timeout") from e
        except aiohttp.ClientError as e:
            logger.error(f"Open Library request error: {e}")
            raise UpstreamServiceError(f"Open Library request error: {e}") from e
