"""
Model registry.

Import all models here to ensure they are registered with SQLAlchemy metadata
before ``Base.metadata.create_all`` runs.
"""

from app.db.base import Base
from app.models.book import Book
from app.models.sobre import Sobre

__all__ = [
    "Base",
    "Book",
    "Sobre",
]
