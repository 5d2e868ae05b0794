"""Search collection pipeline: fetch, extract, persist."""

from __future__ import annotations

from typing import Protocol, Sequence

import structlog

from serp_collector.search.extractor import extract_records
from serp_collector.search.models import SearchRecord

logger = structlog.get_logger(__name__)


class PageFetcher(Protocol):
    async def fetch(self, term: str) -> str: ...


class RecordStore(Protocol):
    async def persist(self, records: Sequence[SearchRecord]) -> int: ...


class SearchCollector:
    """Runs one search term through fetcher, extractor and store."""

    def __init__(self, fetcher: PageFetcher, store: RecordStore):
        self.fetcher = fetcher
        self.store = store

    async def collect(self, term: str) -> int:
        """
        Fetch the results page for ``term`` and store every anchor on it.

        Fetch and storage errors propagate to the caller. A page that fails
        to parse yields no records, and the empty batch is still handed to
        the store.

        Returns:
            Number of persisted records
        """
        with structlog.contextvars.bound_contextvars(search_term=term):
            markup = await self.fetcher.fetch(term)
            records = extract_records(markup, term)
            logger.info("Search page processed", records=len(records))

            persisted = await self.store.persist(records)
            logger.info("Search collection completed", persisted=persisted)
            return persisted
