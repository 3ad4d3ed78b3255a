from dataclasses import dataclass

BLOOD_GROUPS = ("A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-")


@dataclass(frozen=True)
class Profile:
    """Per-session personal details. Replaced as a whole on save, never merged in place."""
    name: str = ""
    age: str = ""
    blood_group: str = ""
    permanent_illness: str = ""
    email: str = ""
    phone: str = ""
    emergency_contact: str = ""
    address: str = ""
    profile_image: str = ""  # data URL, empty when unset

    def to_dict(self):
        return {
            "name": self.name,
            "age": self.age,
            "bloodGroup": self.blood_group,
            "permanentIllness": self.permanent_illness,
            "email": self.email,
            "phone": self.phone,
            "emergencyContact": self.emergency_contact,
            "address": self.address,
            "profileImage": self.profile_image,
        }

    @classmethod
    def from_values(cls, values):
        """Build from camelCase form values; unknown keys are ignored."""
        by_key = {
            "name": "name", "age": "age", "bloodGroup": "blood_group",
            "permanentIllness": "permanent_illness", "email": "email", "phone": "phone",
            "emergencyContact": "emergency_contact", "address": "address",
            "profileImage": "profile_image",
        }
        return cls(**{attr: values[key] for key, attr in by_key.items() if key in values})
