"""Coarse file category derived from a MIME type string."""

from ..models.search import FileCategory

_DOCUMENT_MARKERS = ("pdf", "document", "text")
_ARCHIVE_MARKERS = ("zip", "archive", "tar", "rar")


def get_file_category(mime_type: str) -> FileCategory:
    """First matching rule wins; unrecognized types count as documents."""
    mime = mime_type or ""
    if mime.startswith("image/"):
        return FileCategory.IMAGE
    if mime.startswith("video/"):
        return FileCategory.VIDEO
    if mime.startswith("audio/"):
        return FileCategory.AUDIO
    if any(marker in mime for marker in _DOCUMENT_MARKERS):
        return FileCategory.DOCUMENT
    if any(marker in mime for marker in _ARCHIVE_MARKERS):
        return FileCategory.ARCHIVE
    return FileCategory.DOCUMENT
