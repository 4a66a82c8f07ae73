"""Image schemas."""

from dataclasses import dataclass
from enum import Enum


class ImageKind(str, Enum):
    """Record types that carry an image BLOB."""

    LIVRO = "livro"
    SOBRE = "sobre"


@dataclass
class StoredImage:
    """Raw image bytes with their MIME type as stored in the database."""

    data: bytes
    content_type: str | None = None


def image_url(kind: ImageKind, key: int) -> str:
    """Public URL of a record's image."""
    return f"/api/image/{kind.value}/{key}"
