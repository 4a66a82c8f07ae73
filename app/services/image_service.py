"""Image service for BLOB lookups across record types."""

import re

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.book import Book
from app.models.sobre import Sobre
from app.schemas.image import ImageKind, StoredImage

# Primary-key column each record type is looked up by
_LOOKUPS = {
    ImageKind.LIVRO: (Book, Book.id),
    ImageKind.SOBRE: (Sobre, Sobre.ano),
}


# SQLite INTEGER is a signed 64-bit value
MAX_KEY = 2**63 - 1

_DIGITS = re.compile(r"[0-9]+")


def parse_key(raw: str) -> int | None:
    """
    Parse a record key from a path segment.

    Only plain ASCII digits are accepted (no sign, whitespace or underscores).
    Returns None when the segment is not such a number or is too large to be
    a stored key.
    """
    if not _DIGITS.fullmatch(raw):
        return None
    key = int(raw, 10)
    if key > MAX_KEY:
        return None
    return key


class ImageService:
    """Reads image bytes and MIME type for a (type, id) pair."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_image(self, kind: ImageKind, key: int) -> StoredImage | None:
        """
        Fetch the stored image of a record.

        Returns None when the record does not exist or holds no bytes.
        """
        model, column = _LOOKUPS[kind]
        result = await self.db.execute(
            select(model.imagem, model.imagem_tipo).where(column == key)
        )
        row = result.first()
        if row is None or not row.imagem:
            return None
        return StoredImage(data=bytes(row.imagem), content_type=row.imagem_tipo)
