"""Pytest configuration and fixtures for hookquery tests."""

from concurrent.futures import Future
from typing import Any, Dict, List, Optional, Tuple

import pytest
from dotenv import load_dotenv

from hookquery.abc import Transport
from hookquery.collection import Collection

# Load environment variables
load_dotenv()


# In-memory transport for dispatch testing
class RecordingTransport(Transport):
    """Transport that records every call and returns already-settled futures.

    - `responses` maps a path to the result (or exception) of its next call
    - `calls` lists `(method, path, payload)` in dispatch order
    """

    def __init__(self, default: Any = None) -> None:
        self.calls: List[Tuple[str, str, Any]] = []
        self.responses: Dict[str, Any] = {}
        self.default = default

    def _settle(self, method: str, path: str, payload: Any) -> Future:
        self.calls.append((method, path, payload))
        future: Future = Future()
        outcome = self.responses.get(path, self.default)
        if isinstance(outcome, BaseException):
            future.set_exception(outcome)
        else:
            future.set_result(outcome)
        return future

    def get(self, path: str, query: Optional[Dict[str, Any]] = None) -> Future:
        return self._settle("get", path, query)

    def post(self, path: str, payload: Any = None) -> Future:
        return self._settle("post", path, payload)

    def put(self, path: str, payload: Any = None) -> Future:
        return self._settle("put", path, payload)

    def remove(self, path: str, query: Optional[Dict[str, Any]] = None) -> Future:
        return self._settle("remove", path, query)

    @property
    def last_call(self) -> Tuple[str, str, Any]:
        return self.calls[-1]


class PendingTransport(RecordingTransport):
    """Transport whose futures stay pending until the test settles them."""

    def __init__(self) -> None:
        super().__init__()
        self.futures: List[Future] = []

    def _settle(self, method: str, path: str, payload: Any) -> Future:
        self.calls.append((method, path, payload))
        future: Future = Future()
        self.futures.append(future)
        return future


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def pending_transport():
    return PendingTransport()


@pytest.fixture
def posts(transport):
    """Builder for the `posts` collection over a recording transport."""
    return Collection(transport, "posts")


@pytest.fixture
def sample_rows():
    return [
        {"id": 1, "title": "First", "stars": 5},
        {"id": 2, "title": "Second", "stars": 3},
        {"id": 3, "title": "Third", "stars": 4},
    ]
