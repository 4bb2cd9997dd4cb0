"""Provider registry: local name -> the single entry that supplies it."""

from __future__ import annotations

import logging
from collections.abc import ItemsView, Iterable, Iterator

from autoimports.config import ImportEntry

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Ordered mapping from local name to ImportEntry.

    The first entry registered for a local name wins; later entries for the
    same name are discarded. Iteration follows registration order.
    """

    def __init__(self, entries: Iterable[ImportEntry] = ()) -> None:
        self._entries: dict[str, ImportEntry] = {}
        for entry in entries:
            self.add(entry)

    def add(self, entry: ImportEntry) -> bool:
        """Register ``entry`` unless its local name is taken. Returns True if kept."""
        local = entry.local_name
        existing = self._entries.get(local)
        if existing is not None:
            logger.debug(
                f"Ignoring '{local}' from '{entry.source}': already provided by '{existing.source}'"
            )
            return False
        self._entries[local] = entry
        return True

    def get(self, name: str) -> ImportEntry | None:
        return self._entries.get(name)

    def names(self) -> frozenset[str]:
        return frozenset(self._entries)

    def items(self) -> ItemsView[str, ImportEntry]:
        return self._entries.items()

    def entries(self) -> list[ImportEntry]:
        return list(self._entries.values())

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
