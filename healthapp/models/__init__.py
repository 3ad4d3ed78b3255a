from .reminder import Reminder
from .vaccination import Vaccination
from .appointment import Appointment, AppointmentTest
from .uploaded_file import UploadedFile
from .profile import Profile
