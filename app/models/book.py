"""Book model with its cover image."""

from sqlalchemy import Integer, LargeBinary, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Book(Base):
    """Book database model."""

    __tablename__ = "livros"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    titulo: Mapped[str] = mapped_column(String(255))
    autor: Mapped[str | None] = mapped_column(String(255), nullable=True)
    descricao: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Cover image stored as BLOB
    imagem: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True, deferred=True)
    imagem_tipo: Mapped[str | None] = mapped_column(String(100), nullable=True)
