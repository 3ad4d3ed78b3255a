import base64
import logging
import time

from healthapp.models.uploaded_file import type_for_mimetype

logger = logging.getLogger(__name__)


def format_file_size(num_bytes):
    if num_bytes < 1024:
        return f"{num_bytes} B"
    if num_bytes < 1024 * 1024:
        return f"{num_bytes / 1024:.1f} KB"
    return f"{num_bytes / (1024 * 1024):.1f} MB"


class FileIngestor:
    """Turns raw uploaded bytes into the fields of an UploadedFile."""

    def ingest(self, filename, content, mimetype):
        raise NotImplementedError


class DataUrlFileIngestor(FileIngestor):
    """
    Keeps the file inline as a base64 data URL; nothing touches disk.
    A capture with no filename (camera) is named Photo_<epoch-ms>.jpg.
    """

    def ingest(self, filename, content, mimetype):
        mimetype = mimetype or "application/octet-stream"
        name = (filename or "").strip() or f"Photo_{int(time.time() * 1000)}.jpg"
        encoded = base64.b64encode(content).decode("ascii")
        logger.debug("Ingested %s (%s, %d bytes)", name, mimetype, len(content))
        return {
            "name": name,
            "type": type_for_mimetype(mimetype),
            "size": format_file_size(len(content)),
            "url": f"data:{mimetype};base64,{encoded}",
        }
