"""Search collection endpoint."""

import json

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from serp_collector.api.models.search import CollectResponse
from serp_collector.search.fetcher import FetchError
from serp_collector.storage.mongo import StorageError

router = APIRouter(tags=["search"])
logger = structlog.get_logger(__name__)

SUCCESS_MESSAGE = "Search results saved to MongoDB successfully!"
DECODE_ERROR = "failed to decode search parameters"
INVALID_TERM_ERROR = "missing or invalid search term"
STORAGE_ERROR = "failed to save search results"

ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/", methods=ANY_METHOD, response_model=CollectResponse)
async def collect_search_results(request: Request):
    """
    Fetch the results page for ``{"term": "..."}`` and store its anchors.

    Errors are returned as plain text: 400 for bad input, 502 when the
    search page cannot be fetched, 500 when records cannot be stored.
    """
    body = await request.body()
    try:
        params = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        logger.info("Rejected search request", reason="decode", error=str(e))
        return PlainTextResponse(DECODE_ERROR, status_code=400)

    if params is not None and not isinstance(params, dict):
        logger.info("Rejected search request", reason="decode", error="body is not a JSON object")
        return PlainTextResponse(DECODE_ERROR, status_code=400)

    term = params.get("term") if params else None
    if not isinstance(term, str):
        logger.info("Rejected search request", reason="term")
        return PlainTextResponse(INVALID_TERM_ERROR, status_code=400)

    collector = request.app.state.collector
    try:
        await collector.collect(term)
    except FetchError as e:
        return PlainTextResponse(e.message, status_code=502)
    except StorageError:
        return PlainTextResponse(STORAGE_ERROR, status_code=500)

    return CollectResponse(message=SUCCESS_MESSAGE)
