"""Sobre model for the collective's timeline."""

from sqlalchemy import Integer, LargeBinary, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Sobre(Base):
    """Timeline entry, one per year."""

    __tablename__ = "sobre"

    ano: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    descricao: Mapped[str] = mapped_column(Text)

    imagem: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True, deferred=True)
    imagem_tipo: Mapped[str | None] = mapped_column(String(100), nullable=True)
