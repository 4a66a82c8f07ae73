"""Book service."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.book import Book
from app.schemas.book import BookDTO
from app.schemas.image import ImageKind, image_url
from app.services.base_service import BaseService

_HAS_IMAGE = (func.coalesce(func.length(Book.imagem), 0) > 0).label("has_image")


class BookService(BaseService[Book]):
    """Read access to the book catalogue."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Book)

    def _query(self):
        return select(Book.id, Book.titulo, Book.autor, Book.descricao, _HAS_IMAGE)

    async def get_all_dto(self) -> list[BookDTO]:
        """Get all books ordered by id."""
        result = await self.db.execute(self._query().order_by(Book.id))
        return [self._to_dto(row) for row in result]

    async def get_dto(self, book_id: int) -> BookDTO | None:
        """Get one book, None if missing."""
        result = await self.db.execute(self._query().where(Book.id == book_id))
        row = result.first()
        return self._to_dto(row) if row else None

    def _to_dto(self, row) -> BookDTO:
        return BookDTO(
            id=row.id,
            titulo=row.titulo,
            autor=row.autor,
            descricao=row.descricao,
            image_url=image_url(ImageKind.LIVRO, row.id) if row.has_image else None,
        )
