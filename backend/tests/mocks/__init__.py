"""Mock objects for testing."""

from tests.mocks.mock_fetcher import MockFetcher
from tests.mocks.mock_mongo import MockMongoClient
from tests.mocks.mock_session import MockClientSession, MockResponse
from tests.mocks.mock_store import MockRecordStore

__all__ = [
    "MockFetcher",
    "MockMongoClient",
    "MockClientSession",
    "MockResponse",
    "MockRecordStore",
]
