"""Search page fetching and anchor extraction."""

from serp_collector.search.extractor import extract_records
from serp_collector.search.fetcher import (
    FetchError,
    SearchPageFetcher,
    SearchRequestError,
    SearchResponseReadError,
    build_search_url,
)
from serp_collector.search.models import SearchRecord

__all__ = [
    "FetchError",
    "SearchPageFetcher",
    "SearchRecord",
    "SearchRequestError",
    "SearchResponseReadError",
    "build_search_url",
    "extract_records",
]
