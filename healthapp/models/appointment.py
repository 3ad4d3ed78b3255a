from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class AppointmentTest:
    """A test ordered for an appointment. Embedded, not a separate record."""
    id: str
    name: str

    def to_dict(self):
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class Appointment:
    id: str
    created_at: str
    doctor_name: str
    specialty: str
    date: str
    time: str
    notes: str = ""
    tests: Tuple[AppointmentTest, ...] = field(default_factory=tuple)

    def to_dict(self):
        return {
            "id": self.id,
            "createdAt": self.created_at,
            "doctorName": self.doctor_name,
            "specialty": self.specialty,
            "date": self.date,
            "time": self.time,
            "notes": self.notes,
            "tests": [t.to_dict() for t in self.tests],
        }
