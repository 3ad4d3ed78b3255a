"""
One user's records and the submit pipeline that feeds them.

validate -> derive -> stamp id/createdAt -> prepend to store
"""

import logging
from collections import OrderedDict

from healthapp.core import derived, identity
from healthapp.core.record_store import RecordStore, ReminderStore
from healthapp.core.validator import (
    APPOINTMENT, PROFILE, REMINDER, UPLOADED_FILE, VACCINATION, validate_or_raise,
)
from healthapp.models import (
    Appointment, AppointmentTest, Profile, Reminder, UploadedFile, Vaccination,
)
from healthapp.models.uploaded_file import FILE_TYPES

logger = logging.getLogger(__name__)

RECENT_ACTIVITY_LIMIT = 2
FILE_TYPE_FILTERS = ("all",) + FILE_TYPES


class HealthSession:
    def __init__(self, session_id=None, max_files=None, strict_custom_dates=True, clock=None):
        self.id = session_id or identity.new_id()
        self.reminders = ReminderStore()
        self.vaccinations = RecordStore("vaccination")
        self.appointments = RecordStore("appointment")
        self.files = RecordStore("uploaded_file", capacity=max_files)
        self.profile = Profile()
        self.strict_custom_dates = strict_custom_dates
        # clock() -> ISO timestamp; injectable for tests
        self._clock = clock or identity.now

    # ---------------- reminders ----------------
    def add_reminder(self, fields, today=None):
        values = validate_or_raise(
            REMINDER, fields, today=today, strict_custom_dates=self.strict_custom_dates
        )
        end_date = derived.compute_end_date(
            values["durationType"], values["startDate"], values["endDate"]
        )
        reminder = Reminder(
            id=identity.new_id(),
            created_at=self._clock(),
            medicine_name=values["medicineName"],
            dosage=values["dosage"],
            time=values["time"],
            phone_number=values["phoneNumber"],
            active=values["active"],
            duration_type=values["durationType"],
            start_date=values["startDate"],
            end_date=end_date,
        )
        self.reminders.add(reminder)
        logger.info("Reminder set for %s at %s (%s)", reminder.medicine_name, reminder.time,
                    reminder.duration_type)
        return reminder

    def delete_reminder(self, reminder_id):
        return self.reminders.delete_by_id(reminder_id)

    def toggle_reminder(self, reminder_id):
        return self.reminders.toggle_active(reminder_id)

    # ---------------- vaccinations ----------------
    def add_vaccination(self, fields):
        values = validate_or_raise(VACCINATION, fields)
        vaccination = Vaccination(
            id=identity.new_id(),
            created_at=self._clock(),
            vaccine_name=values["vaccineName"],
            dose_number=values["doseNumber"],
            date_administered=values["dateAdministered"],
            next_due_date=values["nextDueDate"],
            administered_by=values["administeredBy"],
            location=values["location"],
            batch_number=values["batchNumber"],
            notes=values["notes"],
        )
        self.vaccinations.add(vaccination)
        return vaccination

    def delete_vaccination(self, vaccination_id):
        return self.vaccinations.delete_by_id(vaccination_id)

    # ---------------- appointments ----------------
    def add_appointment(self, fields):
        values = validate_or_raise(APPOINTMENT, fields)
        appointment = Appointment(
            id=identity.new_id(),
            created_at=self._clock(),
            doctor_name=values["doctorName"],
            specialty=values["specialty"],
            date=values["date"],
            time=values["time"],
            notes=values["notes"],
            tests=tuple(AppointmentTest(id=identity.new_id(), name=n) for n in values["tests"]),
        )
        self.appointments.add(appointment)
        return appointment

    def delete_appointment(self, appointment_id):
        return self.appointments.delete_by_id(appointment_id)

    # ---------------- uploaded files ----------------
    def add_uploaded_file(self, fields, size=""):
        """
        ``size`` is the measured display size from the FileIngestor; any size
        in ``fields`` is ignored, as is any client upload date.
        """
        values = validate_or_raise(UPLOADED_FILE, fields)
        stamp = self._clock()
        uploaded = UploadedFile(
            id=identity.new_id(),
            created_at=stamp,
            name=values["name"],
            type=values["type"],
            upload_date=stamp,
            size=size,
            url=values["url"],
        )
        self.files.add(uploaded)
        return uploaded

    def delete_uploaded_file(self, file_id):
        return self.files.delete_by_id(file_id)

    def search_files(self, query="", file_type="all"):
        """Case-insensitive name match plus an ``all|image|document`` filter, newest first."""
        if file_type not in FILE_TYPE_FILTERS:
            raise ValueError(f"Unknown file type filter: {file_type}")
        needle = (query or "").strip().lower()
        return [
            f for f in self.files.list()
            if needle in f.name.lower() and (file_type == "all" or f.type == file_type)
        ]

    def files_grouped_by_date(self, files=None):
        groups = OrderedDict()
        for f in self.files.list() if files is None else files:
            groups.setdefault(derived.format_display_date(f.upload_date, "long"), []).append(f)
        return groups

    # ---------------- profile ----------------
    def set_profile(self, **details):
        """Seed profile fields from signup/login without validation; blank values are skipped."""
        merged = self.profile.to_dict()
        merged.update({k: v for k, v in details.items() if v})
        self.profile = Profile.from_values(merged)
        return self.profile

    def update_profile(self, fields):
        """
        Save the profile form. Fields not sent keep their current value;
        a failed validation leaves the stored profile untouched.
        """
        merged = self.profile.to_dict()
        merged.update({k: v for k, v in (fields or {}).items() if k in merged})
        values = validate_or_raise(PROFILE, merged)
        self.profile = Profile.from_values(values)
        logger.info("Profile updated for session %s", self.id)
        return self.profile

    # ---------------- dashboard ----------------
    def dashboard(self, today=None):
        return {
            "recentVaccinations": list(self.vaccinations.recent(RECENT_ACTIVITY_LIMIT)),
            "recentUploads": list(self.files.recent(RECENT_ACTIVITY_LIMIT)),
            "upcomingVaccinations": [
                v for v in self.vaccinations.list() if derived.is_upcoming(v.next_due_date, today)
            ],
            "overdueVaccinations": [
                v for v in self.vaccinations.list() if derived.is_overdue(v.next_due_date, today)
            ],
            "activeReminders": list(self.reminders.active()),
            "counts": {
                "reminders": len(self.reminders),
                "vaccinations": len(self.vaccinations),
                "appointments": len(self.appointments),
                "files": len(self.files),
            },
        }
