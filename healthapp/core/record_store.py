import logging
import threading

from healthapp.errors import UploadLimitExceeded

logger = logging.getLogger(__name__)


class RecordStore:
    """
    In-memory, newest-first list of records of one kind.

      - add() puts the record at index 0
      - delete_by_id() is idempotent: an unknown id is a no-op
      - list() returns a tuple, so callers cannot mutate the store through it
      - capacity, when set, caps the number of records (free-tier upload limit)
    """

    def __init__(self, kind, capacity=None):
        self.kind = kind
        self.capacity = capacity
        self._records = []
        self._lock = threading.Lock()

    def add(self, record):
        with self._lock:
            if any(r.id == record.id for r in self._records):
                raise ValueError(f"Duplicate {self.kind} id: {record.id}")
            if self.capacity is not None and len(self._records) >= self.capacity:
                raise UploadLimitExceeded(self.capacity)
            self._records.insert(0, record)
        logger.debug("Added %s id=%s", self.kind, record.id)

    def delete_by_id(self, record_id):
        with self._lock:
            before = len(self._records)
            self._records = [r for r in self._records if r.id != record_id]
            removed = before != len(self._records)
        if removed:
            logger.debug("Deleted %s id=%s", self.kind, record_id)
        return removed

    def get(self, record_id):
        with self._lock:
            for r in self._records:
                if r.id == record_id:
                    return r
        return None

    def list(self):
        with self._lock:
            return tuple(self._records)

    def recent(self, n):
        return self.list()[:n]

    def remaining(self):
        if self.capacity is None:
            return None
        return max(self.capacity - len(self), 0)

    def __len__(self):
        with self._lock:
            return len(self._records)


class ReminderStore(RecordStore):
    def __init__(self):
        super().__init__("reminder")

    def toggle_active(self, record_id):
        """Flip ``active`` on the matching reminder; returns it, or None if not found."""
        with self._lock:
            for r in self._records:
                if r.id == record_id:
                    r.active = not r.active
                    return r
        return None

    def active(self):
        return tuple(r for r in self.list() if r.active)
