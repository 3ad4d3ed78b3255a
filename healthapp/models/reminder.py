from dataclasses import dataclass


@dataclass
class Reminder:
    id: str
    created_at: str
    medicine_name: str
    time: str  # HH:MM, 24h
    phone_number: str
    duration_type: str  # 'everyday', 'week', 'custom'
    dosage: str = "As prescribed"
    start_date: str = ""
    end_date: str = ""  # empty for 'everyday'
    active: bool = True

    def to_dict(self):
        return {
            "id": self.id,
            "createdAt": self.created_at,
            "medicineName": self.medicine_name,
            "dosage": self.dosage,
            "time": self.time,
            "phoneNumber": self.phone_number,
            "active": self.active,
            "durationType": self.duration_type,
            "startDate": self.start_date,
            "endDate": self.end_date,
        }
