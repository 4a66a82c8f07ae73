"""Database models."""

from app.models.book import Book
from app.models.sobre import Sobre

__all__ = [
    "Book",
    "Sobre",
]
