from dataclasses import dataclass

IMAGE = "image"
DOCUMENT = "document"
FILE_TYPES = (IMAGE, DOCUMENT)


def type_for_mimetype(mimetype):
    return IMAGE if mimetype.startswith("image/") else DOCUMENT


@dataclass(frozen=True)
class UploadedFile:
    id: str
    created_at: str
    name: str
    type: str  # 'image' or 'document'
    upload_date: str
    size: str = ""  # display string, e.g. "1.2 MB"
    url: str = ""  # opaque reference (data URL for in-memory uploads)

    def to_dict(self):
        return {
            "id": self.id,
            "createdAt": self.created_at,
            "name": self.name,
            "type": self.type,
            "uploadDate": self.upload_date,
            "size": self.size,
            "url": self.url,
        }
