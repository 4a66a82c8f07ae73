"""Pydantic schemas for API request/response validation."""

from app.schemas.book import BookDTO
from app.schemas.image import ImageKind, StoredImage, image_url
from app.schemas.sobre import SobreDTO

__all__ = [
    "BookDTO",
    "ImageKind",
    "StoredImage",
    "image_url",
    "SobreDTO",
]
