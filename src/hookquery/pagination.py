"""Pagination result holder returned by `Collection.paginate()`."""

from concurrent.futures import Future
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from .collection import Collection


class Pagination:
    """Page metadata and items of one paginated read.

    Filled by `fetch_complete` with the service's paginator payload
    (`total`, `per_page`, `current_page`, `last_page`, `from`, `to`, `data`).
    """

    def __init__(self, collection: "Collection", per_page: Optional[int] = None) -> None:
        self.collection = collection
        self.per_page = per_page
        self.total: Optional[int] = None
        self.current_page: Optional[int] = None
        self.last_page: Optional[int] = None
        self.from_: Optional[int] = None
        self.to: Optional[int] = None
        self.items: List[Any] = []
        self.future: Optional[Future] = None
        self.error: Optional[BaseException] = None
        self._fetching = True

    def fetch_complete(self, payload: Dict[str, Any]) -> "Pagination":
        self._fetching = False
        self.total = payload.get("total")
        self.per_page = payload.get("per_page", self.per_page)
        self.current_page = payload.get("current_page")
        self.last_page = payload.get("last_page")
        self.from_ = payload.get("from")
        self.to = payload.get("to")
        self.items = list(payload.get("data") or [])
        return self

    def fetch_failed(self, exc: BaseException) -> "Pagination":
        self._fetching = False
        self.error = exc
        return self

    def is_fetching(self) -> bool:
        return self._fetching

    def has_next(self) -> bool:
        if self.current_page is None or self.last_page is None:
            return False
        return self.current_page < self.last_page

    def has_previous(self) -> bool:
        return self.current_page is not None and self.current_page > 1

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return (
            f"<Pagination {self.collection.name} page={self.current_page}/{self.last_page} "
            f"per_page={self.per_page} total={self.total}>"
        )
