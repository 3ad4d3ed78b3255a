# healthapp/services/reminder_monitor.py
"""
Background reminder polling.

Every interval the monitor reads each live session's reminders and hands the
active ones whose time matches the current HH:MM to the NotificationSender.
It only reads the stores; it never adds, deletes or toggles.
"""

import logging
import threading
from datetime import datetime

from healthapp.services.notification_service import LoggingSmsSender, reminder_message

logger = logging.getLogger(__name__)


def due_reminders(reminders, now=None):
    now = now or datetime.now()
    current_time = f"{now.hour:02d}:{now.minute:02d}"
    return [r for r in reminders if r.active and r.time == current_time]


class ReminderMonitor:
    def __init__(self, registry, sender=None, interval_secs=60):
        self.registry = registry
        self.sender = sender or LoggingSmsSender()
        self.interval_secs = interval_secs
        self.stop_event = threading.Event()
        self._thread = None

    def check_once(self, now=None):
        """Send notifications for everything due at ``now``; returns the reminders sent."""
        sent = []
        for session in self.registry.all():
            for reminder in due_reminders(session.reminders.list(), now):
                if self.sender.send(reminder.phone_number, reminder_message(reminder)):
                    sent.append(reminder)
        return sent

    def start(self):
        if self._thread and self._thread.is_alive():
            return
        self.stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="healthapp-reminder-monitor", daemon=True)
        self._thread.start()
        logger.info("Reminder monitor started (every %ss)", self.interval_secs)

    def stop(self):
        self.stop_event.set()
        if self._thread:
            self._thread.join(timeout=5)
        self._thread = None

    def _run(self):
        while not self.stop_event.wait(self.interval_secs):
            try:
                sent = self.check_once()
                if sent:
                    logger.info("Reminder monitor sent %d notification(s)", len(sent))
            except Exception as e:
                logger.exception("Reminder monitor error: %s", e)
