"""
In-memory subset-tracking store.
"""

from __future__ import annotations

from typing import Dict, Generic, List, TypeVar

V = TypeVar("V")


class SubsetTrackingStore(Generic[V]):
    """
    Name -> record map plus an independently shrinkable active subset.

    The full map answers "what do we know about X"; the active subset
    answers "is X still plausible". Refining the subset never touches the
    full map. Both views keep insertion order.
    """

    def __init__(self) -> None:
        self._records: Dict[str, V] = {}
        self._active: Dict[str, None] = {}

    def put(self, name: str, record: V) -> None:
        self._records[name] = record
        self._active[name] = None

    def get(self, name: str) -> V:
        self._require(name)
        return self._records[name]

    def contains_key(self, name: str) -> bool:
        return name in self._records

    def is_active(self, name: str) -> bool:
        return name in self._active

    def refine(self, name: str) -> None:
        self._active.pop(name, None)

    def full_keys(self) -> List[str]:
        return list(self._records)

    def active_keys(self) -> List[str]:
        return list(self._active)

    def full_size(self) -> int:
        return len(self._records)

    def active_size(self) -> int:
        return len(self._active)

    def __getitem__(self, name: str) -> V:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)

    def _require(self, name: str) -> None:
        if name not in self._records:
            raise KeyError(f"Unknown key '{name}'.")
