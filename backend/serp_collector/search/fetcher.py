"""Search results page fetching."""

import asyncio
from urllib.parse import quote_plus

import aiohttp
import structlog
from yarl import URL

logger = structlog.get_logger(__name__)

SEARCH_URL = "https://www.google.com/search"


class FetchError(Exception):
    """Raised when the search results page cannot be retrieved."""

    message = "failed to fetch search page"

    def __init__(self, url: str, detail: str = ""):
        super().__init__(f"{self.message}: {detail}" if detail else self.message)
        self.url = url
        self.detail = detail


class SearchRequestError(FetchError):
    """The request never produced a response."""

    message = "failed to send search request"


class SearchResponseReadError(FetchError):
    """The response body could not be read."""

    message = "failed to read search response"


def build_search_url(term: str) -> str:
    """Return the results page URL for a term, query-escaped (space becomes ``+``)."""
    return f"{SEARCH_URL}?q={quote_plus(term)}"


class SearchPageFetcher:
    """Fetches raw results page markup over a shared aiohttp session."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        timeout: float = 30.0,
        max_retries: int = 0,
        retry_backoff: float = 0.5,
        user_agent: str | None = None,
    ):
        """
        Initialize fetcher.

        Args:
            session: Shared client session, owned by the caller
            timeout: Per-attempt timeout in seconds
            max_retries: Extra attempts when the request cannot be sent
            retry_backoff: Pause between attempts, multiplied by attempt number
            user_agent: Optional User-Agent override
        """
        self.session = session
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.max_retries = max_retries
        self.retry_backoff = retry_backoff
        self.headers = {"User-Agent": user_agent} if user_agent else None

    async def fetch(self, term: str) -> str:
        """
        Fetch the results page for a term.

        The HTTP status is not checked: any response body is returned as markup.

        Raises:
            SearchRequestError: If no response was received
            SearchResponseReadError: If the body could not be read
        """
        url = build_search_url(term)
        logger.info("Fetching search page", url=url)

        attempt = 0
        while True:
            try:
                return await self._fetch_once(url)
            except SearchRequestError as e:
                if attempt >= self.max_retries:
                    raise
                attempt += 1
                logger.warning(
                    "Retrying search request",
                    url=url,
                    attempt=attempt,
                    max_retries=self.max_retries,
                    error=e.detail,
                )
                await asyncio.sleep(self.retry_backoff * attempt)

    async def _fetch_once(self, url: str) -> str:
        try:
            response = await self.session.get(
                URL(url, encoded=True),
                headers=self.headers,
                timeout=self.timeout,
            )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("Search request failed", error=str(e) or type(e).__name__, url=url)
            raise SearchRequestError(url, str(e) or type(e).__name__) from e

        async with response:
            if not 200 <= response.status < 300:
                logger.warning("Search page returned non-2xx status", status=response.status, url=url)

            try:
                markup = await response.text(errors="replace")
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                logger.error("Reading search response failed", error=str(e) or type(e).__name__, url=url)
                raise SearchResponseReadError(url, str(e) or type(e).__name__) from e

        logger.info("Search page fetched", url=url, status=response.status, content_length=len(markup))
        return markup
