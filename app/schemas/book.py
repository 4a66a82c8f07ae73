"""Book schemas for API responses."""

from pydantic import BaseModel, Field


class BookDTO(BaseModel):
    """Book response schema."""

    id: int
    titulo: str
    autor: str | None = None
    descricao: str | None = None
    image_url: str | None = Field(None, alias="imageUrl")

    model_config = {"populate_by_name": True}
