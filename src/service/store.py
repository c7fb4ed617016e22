"""Record store interface and an in-memory implementation."""

from abc import ABC, abstractmethod
from typing import Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel


R = TypeVar("R", bound=BaseModel)


class RecordStore(ABC, Generic[R]):
    """Key-value storage for pydantic records."""

    @abstractmethod
    def get(self, key: str) -> Optional[R]:
        """Return the record stored under `key`, or None."""

    @abstractmethod
    def put(self, key: str, record: R) -> None:
        """Insert or replace the record stored under `key`."""

    @abstractmethod
    def list(self) -> List[R]:
        """All records, in insertion order."""

    def contains(self, key: str) -> bool:
        return self.get(key) is not None


class InMemoryStore(RecordStore[R]):
    """
    Dict-backed store.

    Records are deep-copied on the way in and out, so mutating a returned
    record never changes what is stored.
    """

    def __init__(self) -> None:
        self._records: Dict[str, R] = {}

    def get(self, key: str) -> Optional[R]:
        record = self._records.get(key)
        return record.model_copy(deep=True) if record is not None else None

    def put(self, key: str, record: R) -> None:
        self._records[key] = record.model_copy(deep=True)

    def list(self) -> List[R]:
        return [record.model_copy(deep=True) for record in self._records.values()]

    def contains(self, key: str) -> bool:
        return key in self._records

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)
