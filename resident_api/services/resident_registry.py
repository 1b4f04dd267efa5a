"""
Resident registry - in-memory collection of residents plus the id generator.
One instance per process, owned by the application (app.state.registry).
All reads and writes go through a single lock, so handlers running on worker
threads observe the same sequential behaviour as the event loop.
"""

import logging
import threading

from resident_api.core.metrics import RESIDENTS_CREATED, RESIDENTS_DELETED, RESIDENTS_STORED
from resident_api.schemas.resident import Resident, ResidentCreate

logger = logging.getLogger(__name__)


class ResidentRegistry:
    """Create, list and delete residents. Ids start at 1 and are never reused."""

    def __init__(self) -> None:
        self._residents: list[Resident] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._residents)

    def list_all(self) -> list[Resident]:
        """Snapshot of all residents in insertion order."""
        with self._lock:
            return list(self._residents)

    def create(self, data: ResidentCreate) -> Resident:
        """Assign the next id and append."""
        with self._lock:
            resident = Resident(id=self._next_id, name=data.name, age=data.age)
            self._next_id += 1
            self._residents.append(resident)
            stored = len(self._residents)
        RESIDENTS_CREATED.inc()
        RESIDENTS_STORED.set(stored)
        logger.info("Created resident id=%s", resident.id)
        return resident

    def delete(self, resident_id: int | float) -> bool:
        """Remove the resident with this id. Returns False if there is none."""
        with self._lock:
            for idx, resident in enumerate(self._residents):
                if resident.id == resident_id:
                    del self._residents[idx]
                    stored = len(self._residents)
                    break
            else:
                return False
        RESIDENTS_DELETED.inc()
        RESIDENTS_STORED.set(stored)
        logger.info("Deleted resident id=%s", resident.id)
        return True
