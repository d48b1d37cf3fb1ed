import logging
import threading
import uuid
from dataclasses import replace
from typing import Callable, Dict, List, Optional

from beer_api.models.beer import Beer

log = logging.getLogger(__name__)


class BeerStore:
    """
    In-memory keyed collection of Beer records for the process lifetime.

    Every read and write holds the same lock, and every read hands back a copy,
    so callers never share a reference with the stored record.
    """

    def __init__(self):
        self._beers: Dict[uuid.UUID, Beer] = {}
        self._lock = threading.RLock()

    def add(self, beer: Beer) -> uuid.UUID:
        """Assigns a fresh id to a copy of ``beer`` and inserts it."""
        with self._lock:
            beer_id = uuid.uuid4()
            while beer_id in self._beers:
                beer_id = uuid.uuid4()
            self._beers[beer_id] = replace(beer, id=beer_id)
        log.debug("Stored beer %s", beer_id)
        return beer_id

    def put(self, beer: Beer) -> None:
        """Inserts or replaces the record stored under ``beer.id``."""
        if beer.id is None:
            raise ValueError("Cannot put a beer without an id.")
        with self._lock:
            self._beers[beer.id] = replace(beer)

    def get(self, beer_id: uuid.UUID) -> Optional[Beer]:
        with self._lock:
            beer = self._beers.get(beer_id)
            return replace(beer) if beer is not None else None

    def modify(self, beer_id: uuid.UUID, fn: Callable[[Beer], Beer]) -> Optional[Beer]:
        """
        Atomic read-modify-write. ``fn`` gets a copy of the current record and
        returns its replacement. Returns None without inserting if absent.
        """
        with self._lock:
            current = self._beers.get(beer_id)
            if current is None:
                return None
            updated = replace(fn(replace(current)), id=beer_id)
            self._beers[beer_id] = updated
            return replace(updated)

    def remove(self, beer_id: uuid.UUID) -> bool:
        with self._lock:
            return self._beers.pop(beer_id, None) is not None

    def list_all(self) -> List[Beer]:
        """Snapshot of all records in insertion order."""
        with self._lock:
            return [replace(beer) for beer in self._beers.values()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._beers)

    def __contains__(self, beer_id: object) -> bool:
        with self._lock:
            return beer_id in self._beers
