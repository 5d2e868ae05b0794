"""Anchor extraction from search results pages."""

import structlog
from bs4 import BeautifulSoup
from bs4.element import Tag

from serp_collector.search.models import SearchRecord

logger = structlog.get_logger(__name__)

LOCATION_SELECTOR = ".TbwUpd"


def extract_records(markup: str, search_term: str) -> list[SearchRecord]:
    """
    Build one record per anchor element of a results page.

    Every ``<a>`` in document order becomes a record, navigation links
    included. Text is flattened the way ``get_text()`` does it: all
    descendant text nodes joined with no separator.

    Args:
        markup: Raw page HTML
        search_term: Term copied into ``keyword`` and ``searchTerm``

    Returns:
        Extracted records, empty if the markup cannot be parsed
    """
    try:
        soup = BeautifulSoup(markup, "html.parser")
    except Exception as e:
        logger.error("Failed to parse search page", error=str(e), search_term=search_term)
        return []

    records = [_anchor_to_record(anchor, search_term) for anchor in soup.find_all("a")]

    logger.debug("Anchors extracted", records=len(records), search_term=search_term)
    return records


def _anchor_to_record(anchor: Tag, search_term: str) -> SearchRecord:
    text = anchor.get_text()
    location = anchor.select_one(LOCATION_SELECTOR)
    return SearchRecord(
        title=text,
        link=anchor.get("href") or "",
        location=location.get_text() if location is not None else "",
        keyword=search_term,
        html=text,
        search_term=search_term,
    )
