import threading
from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from app.shared.utils.schema import Record

RecordT = TypeVar("RecordT", bound=Record)


class Table(Generic[RecordT]):
    """
    Id-indexed in-memory collection for one entity type.

    Ids start at 1, increase by one per insert and are never reused. Rows keep
    insertion order. Every read-modify-write goes through ``lock``; callers that
    need a check-then-insert across several calls hold it themselves (it is
    reentrant).
    """

    def __init__(self, name: str):
        self.name = name
        self.lock = threading.RLock()
        self._rows: Dict[int, RecordT] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[RecordT]:
        with self.lock:
            return iter(list(self._rows.values()))

    def insert(self, build: Callable[[int], RecordT]) -> RecordT:
        """Allocate the next id, build the row with it and store it."""
        with self.lock:
            row_id = self._next_id
            row = build(row_id)
            self._next_id += 1
            self._rows[row_id] = row
            return row

    def get(self, row_id: int) -> Optional[RecordT]:
        return self._rows.get(row_id)

    def find(self, predicate: Callable[[RecordT], bool]) -> Optional[RecordT]:
        for row in self:
            if predicate(row):
                return row
        return None

    def filter(self, predicate: Callable[[RecordT], bool]) -> List[RecordT]:
        return [row for row in self if predicate(row)]

    def all(self, limit: Optional[int] = None) -> List[RecordT]:
        rows = list(self)
        if limit is not None:
            return rows[:limit]
        return rows

    def update(self, row_id: int, **changes) -> Optional[RecordT]:
        """Replace the row with a copy carrying ``changes``; ``None`` if absent."""
        if "id" in changes:
            raise ValueError(f"{self.name}: id is immutable")
        with self.lock:
            row = self._rows.get(row_id)
            if row is None:
                return None
            updated = row.model_copy(update=changes)
            self._rows[row_id] = updated
            return updated
