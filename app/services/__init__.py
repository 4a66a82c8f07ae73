"""Service layer for business logic."""

from app.services.book_service import BookService
from app.services.image_service import ImageService
from app.services.sobre_service import SobreService

__all__ = [
    "BookService",
    "ImageService",
    "SobreService",
]
