"""Entity Store — ordered in-memory collection of records for one entity kind.

Invariants:
    - Insertion order is preserved; list() reflects prior deletions
    - Ids are compared as strings (str(stored) == str(given))
    - remove_at shifts every later record left by one position
    - The store never checks ids for uniqueness; callers generate them

Design Decisions:
    - Plain list + linear scan: the dataset is process-resident and small,
      no secondary index is kept
    - list() returns a shallow copy so callers can iterate while others mutate
"""

from __future__ import annotations

from dataclasses import dataclass, field

from eventgraph.core.domain_types import EntityKind, Record


@dataclass
class EntityStore:
    """Records of a single kind, in insertion order."""

    kind: EntityKind
    records: list[Record] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    def append(self, record: Record) -> None:
        self.records.append(record)

    def find_index(self, record_id: object) -> int | None:
        """Position of the record with this id, or None when absent."""
        wanted = str(record_id)
        for index, record in enumerate(self.records):
            if str(record.get("id")) == wanted:
                return index
        return None

    def get(self, record_id: object) -> Record | None:
        index = self.find_index(record_id)
        if index is None:
            return None
        return self.records[index]

    def list(self) -> list[Record]:
        return list(self.records)

    def replace(self, index: int, record: Record) -> None:
        self.records[index] = record

    def remove_at(self, index: int) -> Record:
        return self.records.pop(index)

    def clear(self) -> int:
        count = len(self.records)
        self.records.clear()
        return count
