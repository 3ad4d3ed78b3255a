from dataclasses import dataclass


@dataclass(frozen=True)
class Vaccination:
    id: str
    created_at: str
    vaccine_name: str
    dose_number: str
    date_administered: str
    administered_by: str
    location: str
    next_due_date: str = ""
    batch_number: str = ""
    notes: str = ""

    def to_dict(self):
        return {
            "id": self.id,
            "createdAt": self.created_at,
            "vaccineName": self.vaccine_name,
            "doseNumber": self.dose_number,
            "dateAdministered": self.date_administered,
            "nextDueDate": self.next_due_date,
            "administeredBy": self.administered_by,
            "location": self.location,
            "batchNumber": self.batch_number,
            "notes": self.notes,
        }
