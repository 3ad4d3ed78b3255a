# healthapp/utils/session_store.py
import logging
import threading
import time

from healthapp.core.session import HealthSession

logger = logging.getLogger(__name__)


class SessionRegistry:
    """
    Process-local map of session id -> HealthSession.

      - A session is created at login/signup and dropped at logout
      - Sessions idle for longer than ttl_secs expire; they are swept on
        start/all/len and dropped on lookup
      - Data is never written anywhere; it is gone once the session ends
    """
    def __init__(self, ttl_secs=None, max_files=None):
        self.ttl_secs = ttl_secs
        self.max_files = max_files
        self._d = {}
        self._lock = threading.Lock()

    def _expired(self, last_seen, now):
        return bool(self.ttl_secs) and now - last_seen > self.ttl_secs

    def _sweep(self, now):
        # caller holds self._lock
        for session_id in [k for k, (last_seen, _) in self._d.items() if self._expired(last_seen, now)]:
            del self._d[session_id]
            logger.info("Session expired: %s", session_id)

    def start(self):
        session = HealthSession(max_files=self.max_files)
        now = time.time()
        with self._lock:
            self._sweep(now)
            self._d[session.id] = (now, session)
        logger.info("Session started: %s", session.id)
        return session

    def get(self, session_id):
        now = time.time()
        with self._lock:
            v = self._d.get(session_id)
            if not v:
                return None
            last_seen, session = v
            if self._expired(last_seen, now):
                self._d.pop(session_id, None)
                logger.info("Session expired: %s", session_id)
                return None
            self._d[session_id] = (now, session)
            return session

    def end(self, session_id):
        with self._lock:
            v = self._d.pop(session_id, None)
        if v:
            logger.info("Session ended: %s", session_id)
        return v is not None

    def all(self):
        """Live sessions only; does not refresh their idle timers."""
        now = time.time()
        with self._lock:
            self._sweep(now)
            return [session for _, session in self._d.values()]

    def __len__(self):
        now = time.time()
        with self._lock:
            self._sweep(now)
            return len(self._d)
