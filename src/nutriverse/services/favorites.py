"""Client-owned favorites and recent searches.

Both live in a key-value store that belongs to the client, the way a browser
keeps them in local storage. Listeners subscribed to the store are told which
key changed, so every view showing favorites can refresh itself.
"""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

FAVORITES_KEY = "nutriverse-favorites"
RECENT_SEARCHES_KEY = "nutriverse-recent-searches"
MAX_RECENT_SEARCHES = 5
MIN_RECENT_SEARCH_LENGTH = 3

Listener = Callable[[str], None]

_logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """String key-value storage with change notifications."""

    def get(self, key: str) -> str | None:
        """Return the stored value, if present."""

    def set(self, key: str, value: str) -> None:
        """Store a value and notify listeners."""

    def remove(self, key: str) -> None:
        """Delete a value and notify listeners."""

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener and return a callable that unregisters it."""


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """Process-local key-value store."""

    _values: dict[str, str] = field(default_factory=dict)
    _listeners: list[Listener] = field(default_factory=list)

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value
        self._notify(key)

    def remove(self, key: str) -> None:
        if self._values.pop(key, None) is not None:
            self._notify(key)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, key: str) -> None:
        for listener in list(self._listeners):
            listener(key)


def _read_list(store: KeyValueStore, key: str) -> list[str]:
    raw = store.get(key)
    if not raw:
        return []
    try:
        values = json.loads(raw)
    except json.JSONDecodeError:
        _logger.warning("Ignoring corrupt value stored under %s", key)
        return []
    if not isinstance(values, list):
        return []
    return [str(value) for value in values]


@dataclass
class FavoritesService:
    """Favorite food ids stored as a JSON array under one key."""

    store: KeyValueStore
    key: str = FAVORITES_KEY

    def list_ids(self) -> list[str]:
        """Return favorite ids in the order they were added."""
        return _read_list(self.store, self.key)

    def is_favorite(self, food_id: str) -> bool:
        return food_id in self.list_ids()

    def add(self, food_id: str) -> None:
        ids = self.list_ids()
        if food_id not in ids:
            self._write([*ids, food_id])

    def remove(self, food_id: str) -> None:
        ids = self.list_ids()
        if food_id in ids:
            self._write([value for value in ids if value != food_id])

    def toggle(self, food_id: str) -> bool:
        """Flip a food's favorite state and return the new state."""
        if self.is_favorite(food_id):
            self.remove(food_id)
            return False
        self.add(food_id)
        return True

    def subscribe(self, listener: Callable[[list[str]], None]) -> Callable[[], None]:
        """Call ``listener`` with the current ids whenever favorites change."""

        def on_change(key: str) -> None:
            if key == self.key:
                listener(self.list_ids())

        return self.store.subscribe(on_change)

    def _write(self, ids: list[str]) -> None:
        self.store.set(self.key, json.dumps(ids))


@dataclass
class RecentSearchesService:
    """Most recent search terms, newest first."""

    store: KeyValueStore
    key: str = RECENT_SEARCHES_KEY
    limit: int = MAX_RECENT_SEARCHES

    def recent(self) -> list[str]:
        return _read_list(self.store, self.key)

    def record(self, query: str) -> list[str]:
        """Remember a search term; short terms are ignored."""
        if len(query) < MIN_RECENT_SEARCH_LENGTH:
            return self.recent()
        updated = [query, *(item for item in self.recent() if item != query)]
        updated = updated[: self.limit]
        self.store.set(self.key, json.dumps(updated))
        return updated

    def clear(self) -> None:
        self.store.remove(self.key)
