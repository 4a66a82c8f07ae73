"""Timeline (Sobre) schemas for API responses."""

from pydantic import BaseModel, Field


class SobreDTO(BaseModel):
    """Timeline entry response schema."""

    ano: int
    descricao: str
    image_url: str | None = Field(None, alias="imageUrl")

    model_config = {"populate_by_name": True}
