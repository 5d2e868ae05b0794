"""Mock aiohttp client session for testing."""

import asyncio


class MockResponse:
    """Minimal stand-in for ``aiohttp.ClientResponse``."""

    def __init__(self, body: str = "", status: int = 200, read_error: Exception | None = None):
        self.body = body
        self.status = status
        self.read_error = read_error
        self.released = False

    async def text(self, errors: str = "strict") -> str:
        if self.read_error:
            raise self.read_error
        return self.body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.released = True
        return False


class MockClientSession:
    """Replays queued responses or errors for each ``get`` call."""

    def __init__(self, *outcomes, delay: float = 0.0):
        self.outcomes = list(outcomes)
        self.delay = delay
        self.calls: list[dict] = []

    async def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": str(url), "headers": headers, "timeout": timeout})
        if self.delay:
            await asyncio.sleep(self.delay)
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome
