"""
Submit-time form validation.

``validate(record_type, fields)`` checks the required fields of one form in a
fixed order and stops at the first one that is missing, so there is exactly
one error to show the user. String values are trimmed and the trimmed values
are what the caller gets back to store.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from healthapp.core import derived
from healthapp.errors import ValidationFailure
from healthapp.models.profile import BLOOD_GROUPS
from healthapp.models.uploaded_file import FILE_TYPES, type_for_mimetype

REMINDER = "reminder"
VACCINATION = "vaccination"
APPOINTMENT = "appointment"
UPLOADED_FILE = "uploaded_file"
LOGIN = "login"
SIGNUP = "signup"
PROFILE = "profile"

MIN_PASSWORD_LENGTH = 6
MAX_AGE = 150
DEFAULT_DOSAGE = "As prescribed"

_FILL_ALL_REMINDER = "Please fill in all required fields"
_FILL_ALL_AUTH = "Please fill in all fields"

# (field, message) in check order
REQUIRED_FIELDS = {
    REMINDER: [
        ("medicineName", _FILL_ALL_REMINDER),
        ("time", _FILL_ALL_REMINDER),
        ("phoneNumber", _FILL_ALL_REMINDER),
    ],
    VACCINATION: [
        ("vaccineName", "Please enter vaccine name"),
        ("doseNumber", "Please enter dose number"),
        ("dateAdministered", "Please select date administered"),
        ("administeredBy", "Please enter who administered the vaccine"),
        ("location", "Please enter location"),
    ],
    APPOINTMENT: [
        ("doctorName", "Please enter doctor's name"),
        ("specialty", "Please enter doctor's specialty"),
        ("date", "Please select appointment date"),
        ("time", "Please select appointment time"),
    ],
    UPLOADED_FILE: [
        ("name", "Please provide a file name"),
        ("type", "Please provide a file type"),
    ],
    LOGIN: [
        ("email", _FILL_ALL_AUTH),
        ("password", _FILL_ALL_AUTH),
    ],
    SIGNUP: [
        ("name", _FILL_ALL_AUTH),
        ("email", _FILL_ALL_AUTH),
        ("phone", _FILL_ALL_AUTH),
        ("password", _FILL_ALL_AUTH),
    ],
    PROFILE: [
        ("name", "Please enter your name"),
    ],
}

OPTIONAL_FIELDS = {
    REMINDER: ["dosage", "durationType", "startDate", "endDate"],
    VACCINATION: ["nextDueDate", "batchNumber", "notes"],
    APPOINTMENT: ["notes"],
    UPLOADED_FILE: ["url"],
    LOGIN: [],
    SIGNUP: [],
    PROFILE: [
        "age", "bloodGroup", "permanentIllness", "email", "phone",
        "emergencyContact", "address", "profileImage",
    ],
}


@dataclass(frozen=True)
class Ok:
    values: dict = field(default_factory=dict)
    ok = True


@dataclass(frozen=True)
class MissingField:
    field: str
    message: str
    ok = False

    def to_exception(self):
        return ValidationFailure(self.field, self.message)


@dataclass(frozen=True)
class InvalidField:
    field: str
    message: str
    ok = False

    def to_exception(self):
        return ValidationFailure(self.field, self.message)


def _clean(value):
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value).strip()


def _as_bool(value):
    if isinstance(value, str):
        return value.strip().lower() not in ("false", "0", "no", "off", "")
    return bool(value)


def _check_date(values, name, message=None):
    if values.get(name):
        try:
            derived.parse_date(values[name], name)
        except ValidationFailure as e:
            return InvalidField(name, message or e.message)
    return None


def _check_time(values, name):
    try:
        derived.parse_time(values[name], name)
    except ValidationFailure as e:
        return InvalidField(name, e.message)
    return None


def _check_reminder(values, raw, today, strict_custom_dates):
    bad = _check_time(values, "time")
    if bad:
        return bad

    duration_type = (values.get("durationType") or derived.EVERYDAY).lower()
    if duration_type not in derived.DURATION_TYPES:
        return InvalidField("durationType", "Please choose everyday, week or custom")
    values["durationType"] = duration_type
    values["dosage"] = values.get("dosage") or DEFAULT_DOSAGE

    if duration_type == derived.CUSTOM and strict_custom_dates:
        if not values.get("startDate"):
            return MissingField("startDate", "Please select a start date")
        if not values.get("endDate"):
            return MissingField("endDate", "Please select an end date")

    if not values.get("startDate"):
        values["startDate"] = (today or date.today()).isoformat()

    for name in ("startDate", "endDate"):
        bad = _check_date(values, name)
        if bad:
            return bad

    if duration_type == derived.CUSTOM and values.get("endDate"):
        if values["endDate"] < values["startDate"]:
            return InvalidField("endDate", "End date must be on or after the start date")

    values["active"] = _as_bool(raw.get("active", True))
    return None


def _check_vaccination(values, raw, today, strict_custom_dates):
    return _check_date(values, "dateAdministered") or _check_date(values, "nextDueDate")


def _normalize_tests(raw_tests):
    """Accept test names as strings or ``{"name": ...}`` dicts; blanks are dropped."""
    names = []
    for item in raw_tests or []:
        if isinstance(item, str):
            candidate = item.strip()
        elif isinstance(item, dict):
            candidate = (item.get("name") or "").strip()
        else:
            candidate = ""
        if candidate:
            names.append(candidate)
    return names


def _check_appointment(values, raw, today, strict_custom_dates):
    bad = _check_date(values, "date") or _check_time(values, "time")
    if bad:
        return bad
    tests = raw.get("tests") or []
    if not isinstance(tests, (list, tuple)):
        return InvalidField("tests", "Tests must be a list")
    values["tests"] = _normalize_tests(tests)
    return None


def _check_uploaded_file(values, raw, today, strict_custom_dates):
    file_type = values["type"].lower()
    if "/" in file_type:
        file_type = type_for_mimetype(file_type)
    if file_type not in FILE_TYPES:
        return InvalidField("type", "File type must be " + " or ".join(FILE_TYPES))
    values["type"] = file_type
    return None


def _check_password(values, raw, today, strict_custom_dates):
    if len(values["password"]) < MIN_PASSWORD_LENGTH:
        return InvalidField("password", f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    return None


def _check_profile(values, raw, today, strict_custom_dates):
    age = values["age"]
    if age and (not age.isdigit() or int(age) > MAX_AGE):
        return InvalidField("age", "Please enter a valid age")
    if values["bloodGroup"]:
        values["bloodGroup"] = values["bloodGroup"].upper()
        if values["bloodGroup"] not in BLOOD_GROUPS:
            return InvalidField("bloodGroup", "Please choose a blood group from the list")
    return None


_CHECKS = {
    REMINDER: _check_reminder,
    VACCINATION: _check_vaccination,
    APPOINTMENT: _check_appointment,
    UPLOADED_FILE: _check_uploaded_file,
    LOGIN: None,
    SIGNUP: _check_password,
    PROFILE: _check_profile,
}


def validate(record_type, fields, today: Optional[date] = None, strict_custom_dates=True):
    """
    Validate one submitted form.

    Returns ``Ok(values)`` with trimmed values, or the first
    ``MissingField``/``InvalidField`` found. Never raises for bad user input.

    ``strict_custom_dates`` requires start and end dates for a custom
    reminder duration; pass False to accept them blank.
    """
    if record_type not in REQUIRED_FIELDS:
        raise ValueError(f"Unknown record type: {record_type}")
    raw = fields or {}

    values = {}
    for name, message in REQUIRED_FIELDS[record_type]:
        value = _clean(raw.get(name))
        if not value:
            return MissingField(name, message)
        values[name] = value

    for name in OPTIONAL_FIELDS[record_type]:
        values[name] = _clean(raw.get(name))

    check = _CHECKS[record_type]
    if check:
        bad = check(values, raw, today, strict_custom_dates)
        if bad:
            return bad
    return Ok(values)


def validate_or_raise(record_type, fields, **kwargs):
    """Like ``validate`` but raises ``ValidationFailure`` and returns the values dict."""
    result = validate(record_type, fields, **kwargs)
    if not result.ok:
        raise result.to_exception()
    return result.values
