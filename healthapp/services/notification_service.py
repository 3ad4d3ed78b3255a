import logging

logger = logging.getLogger(__name__)


class NotificationSender:
    """Delivers a text message to a phone number. Returns True when accepted."""

    def send(self, phone_number, message):
        raise NotImplementedError


class LoggingSmsSender(NotificationSender):
    """Stand-in SMS gateway: records what would have been sent and logs it."""

    def __init__(self):
        self.sent = []

    def send(self, phone_number, message):
        logger.info("Sending SMS to %s: %s", phone_number, message)
        self.sent.append((phone_number, message))
        return True


def reminder_message(reminder):
    return f"Time to take your medicine: {reminder.medicine_name} ({reminder.dosage})"
