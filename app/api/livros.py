"""Book API endpoints."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.core.deps import DBSession
from app.schemas.book import BookDTO
from app.services.book_service import BookService

router = APIRouter()


@router.get("", response_model=list[BookDTO])
async def get_livros(db: DBSession) -> list[BookDTO]:
    """Get all books."""
    return await BookService(db).get_all_dto()


@router.get("/{book_id}", response_model=BookDTO, responses={404: {"description": "Book not found"}})
async def get_livro(book_id: int, db: DBSession):
    """
    Get one book.

    - **book_id**: Book ID
    """
    book = await BookService(db).get_dto(book_id)
    if not book:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "Livro não encontrado"},
        )
    return book
