from __future__ import annotations

import copy
from typing import Any, Optional, Protocol


class KeyValueBackend(Protocol):
    """Bucket-level persistence: each bucket holds one JSON-encodable value."""

    def read(self, bucket: str) -> Optional[Any]:
        """Return the stored value, or None when the bucket was never written."""

        raise NotImplementedError

    def write(self, bucket: str, value: Any) -> None:
        raise NotImplementedError


class InMemoryBackend:
    """Process-local backend (testing config, scratch sessions)."""

    def __init__(self, initial: Optional[dict[str, Any]] = None):
        self._data: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def read(self, bucket: str) -> Optional[Any]:
        if bucket not in self._data:
            return None
        return copy.deepcopy(self._data[bucket])

    def write(self, bucket: str, value: Any) -> None:
        self._data[bucket] = copy.deepcopy(value)
