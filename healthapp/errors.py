class HealthAppError(Exception):
    """Base class for errors surfaced to the user."""

    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"success": False, "message": self.message}


class ValidationFailure(HealthAppError):
    """A required field is missing or a field value is malformed.

    Always recoverable: the user fixes ``field`` and resubmits.
    """

    status_code = 422

    def __init__(self, field, message=None):
        super().__init__(message or f"Invalid value for {field}")
        self.field = field

    def to_dict(self):
        payload = super().to_dict()
        payload["field"] = self.field
        return payload


class UploadLimitExceeded(HealthAppError):
    status_code = 403

    def __init__(self, limit):
        super().__init__(f"Free plan allows up to {limit} records. Upgrade to upload more.")
        self.limit = limit
