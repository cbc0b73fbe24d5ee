"""
In-memory translation set with dirty tracking.

A TranslationSet holds ResourceRecords keyed by their hash key, keeps
insertion order for iteration, and remembers whether it has been mutated
since it was created or last marked clean.
"""

from typing import Any, Iterable

from xliff_aggregator.core.models import ResourceRecord


class TranslationSet:
    """
    Ordered collection of resource records with a dirty flag.
    """

    def __init__(self, source_locale: str = "en-US"):
        """
        Initialize an empty, clean translation set.

        Args:
            source_locale: Source locale of the resources this set holds
        """
        self.source_locale = source_locale
        self._resources: dict[str, ResourceRecord] = {}
        self._dirty = False

    def add(self, record: ResourceRecord) -> None:
        """
        Add a record to the set.

        New keys are appended. A record equal to the stored one is ignored.
        A different record under an existing key replaces the stored one in
        place. Only the first and last case mark the set dirty.

        Args:
            record: Record to add
        """
        key = record.hash_key()
        existing = self._resources.get(key)
        if existing == record:
            return

        self._resources[key] = record
        self._dirty = True

    def add_all(self, records: Iterable[ResourceRecord]) -> None:
        """Add each record in order."""
        for record in records:
            self.add(record)

    def add_set(self, other: "TranslationSet") -> None:
        """
        Bulk-add the contents of another set, in its iteration order.

        Args:
            other: Set whose records are added to this one
        """
        if other is None:
            return
        self.add_all(other.get_all())

    def get(self, hash_key: str) -> ResourceRecord | None:
        return self._resources.get(hash_key)

    def get_by(self, **criteria: Any) -> list[ResourceRecord]:
        """
        Return records whose fields equal all of the given criteria.

        Example:
            ts.get_by(reskey="welcome.title", target_locale="de-DE")
        """
        return [
            record for record in self._resources.values()
            if all(getattr(record, field, None) == value for field, value in criteria.items())
        ]

    def get_all(self) -> list[ResourceRecord]:
        """Return all records in insertion order."""
        return list(self._resources.values())

    def size(self) -> int:
        return len(self._resources)

    def __len__(self) -> int:
        return len(self._resources)

    def is_dirty(self) -> bool:
        return self._dirty

    def set_clean(self) -> None:
        """Mark the current contents as persisted."""
        self._dirty = False

    def __repr__(self) -> str:
        return f"TranslationSet(size={len(self._resources)}, dirty={self._dirty})"
