"""
Tarot Reader Backend — In-Memory Reading Store
==============================================

What:  The process-lifetime mapping of reading id → Reading, plus the
       reader/writer lock that guards it and the FastAPI dependency that
       hands it to route handlers.
Why:   There is no database. All state lives here and disappears with the
       process.
How:   Reads (list, get, len) hold the shared lock and may run concurrently;
       writes (create, add) hold the exclusive lock.
Who:   Built and seeded by create_app(); injected into route handlers via
       Depends(get_store).

Concurrency Model:
    The /api/readings handlers are sync functions, so FastAPI runs them in
    its worker threadpool. Several threads may therefore touch the store at
    once. Every critical section is a dict operation or a sort, and nothing
    inside a critical section waits on I/O.

    The lock prefers writers: once a writer is waiting, new readers queue
    behind it, so a steady stream of GETs cannot starve a POST.
"""

import logging
import threading
import uuid
from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, List, Optional, Union

from starlette.requests import Request

from app.exceptions import DuplicateReadingError
from app.models.reading import Reading

logger = logging.getLogger(__name__)


class ReadWriteLock:
    """
    Shared/exclusive lock: many concurrent readers or one writer.

    Usage:
        lock = ReadWriteLock()
        with lock.read_lock():
            ...  # concurrent with other readers
        with lock.write_lock():
            ...  # exclusive
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @contextmanager
    def read_lock(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write_lock(self) -> Iterator[None]:
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


def _parse_id(reading_id: Union[str, uuid.UUID]) -> Optional[uuid.UUID]:
    """Coerce an id to UUID; anything unparseable becomes None."""
    if isinstance(reading_id, uuid.UUID):
        return reading_id
    try:
        return uuid.UUID(str(reading_id))
    except ValueError:
        return None


class ReadingStore:
    """
    In-memory store of tarot readings.

    Contract:
        list()   → every reading, newest first (no pagination)
        get(id)  → the reading, or None for unknown AND malformed ids
        create() → new reading with server-generated id and timestamp
        add()    → insert a prebuilt reading (used by the sample seeder)

    There is no update or delete: readings are immutable once stored.
    """

    def __init__(self) -> None:
        self._readings: Dict[uuid.UUID, Reading] = {}
        self._lock = ReadWriteLock()

    def list(self) -> List[Reading]:
        with self._lock.read_lock():
            readings = list(self._readings.values())
        # Sorting a private copy needs no lock
        readings.sort(key=lambda r: r.created_at, reverse=True)
        return readings

    def get(self, reading_id: Union[str, uuid.UUID]) -> Optional[Reading]:
        """
        Look up a reading by id.

        A string that is not a valid UUID is treated exactly like an unknown
        id: the caller gets None, never an exception.
        """
        key = _parse_id(reading_id)
        if key is None:
            return None
        with self._lock.read_lock():
            return self._readings.get(key)

    def create(self, question: str, cards: Iterable[str], interpretation: str) -> Reading:
        """Store a new reading stamped with a fresh uuid4 and the current UTC time."""
        reading = Reading.new(question=question, cards=cards, interpretation=interpretation)
        self.add(reading)
        logger.debug("Created reading %s (%d cards)", reading.id, len(reading.cards))
        return reading

    def add(self, reading: Reading) -> Reading:
        """
        Insert a fully-formed reading.

        Raises:
            DuplicateReadingError: a reading with the same id is already stored.
        """
        with self._lock.write_lock():
            if reading.id in self._readings:
                raise DuplicateReadingError(str(reading.id))
            self._readings[reading.id] = reading
        return reading

    def __len__(self) -> int:
        with self._lock.read_lock():
            return len(self._readings)


# ── Store Dependency ──────────────────────────────────────────────────────
def get_store(request: Request) -> ReadingStore:
    """
    FastAPI dependency returning the store owned by the running application.

    Example usage in a route:
        @router.get("/readings")
        def list_readings(store: ReadingStore = Depends(get_store)):
            return store.list()
    """
    return request.app.state.store
