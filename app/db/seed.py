"""Database seeder loading timeline entries and books from a YAML file.

Example file::

    sobre:
      - ano: 2019
        descricao: Primeiro sarau do coletivo.
        imagem: imagens/2019.jpg
    livros:
      - id: 1
        titulo: Vozes da Margem
        autor: Coletivo À Margem
        imagem: imagens/vozes.png
"""

import asyncio
import mimetypes
from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.db.base import Base
from app.db import models_registry  # noqa: F401 - Import to register models
from app.db.session import async_session_maker, engine
from app.models.book import Book
from app.models.sobre import Sobre
from app.services.book_service import BookService
from app.services.sobre_service import SobreService

settings = get_settings()


async def create_tables() -> None:
    """Create all tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables created")


def load_seed_file(path: Path) -> dict[str, Any]:
    """Read the YAML seed file."""
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def read_image(base_dir: Path, name: str | None) -> tuple[bytes | None, str | None]:
    """Read an image file next to the seed file and guess its MIME type."""
    if not name:
        return None, None
    path = base_dir / name
    if not path.is_file():
        logger.warning(f"Image file not found, skipping: {path}")
        return None, None
    content_type, _ = mimetypes.guess_type(path.name)
    return path.read_bytes(), content_type or settings.default_image_type


async def seed_sobre(db: AsyncSession, entries: list[dict[str, Any]], base_dir: Path) -> int:
    """Upsert timeline entries, keyed by year."""
    sobre_service = SobreService(db)
    for data in entries:
        ano = int(data["ano"])
        imagem, imagem_tipo = read_image(base_dir, data.get("imagem"))
        entry = await sobre_service.get_by_id(ano)
        if not entry:
            entry = Sobre(ano=ano)
            db.add(entry)
        entry.descricao = str(data.get("descricao", ""))
        if imagem is not None:
            entry.imagem = imagem
            entry.imagem_tipo = data.get("imagem_tipo") or imagem_tipo
    await db.commit()
    logger.info(f"Seeded {len(entries)} timeline entries")
    return len(entries)


async def seed_livros(db: AsyncSession, entries: list[dict[str, Any]], base_dir: Path) -> int:
    """Upsert books, keyed by id."""
    book_service = BookService(db)
    for data in entries:
        imagem, imagem_tipo = read_image(base_dir, data.get("imagem"))
        book = await book_service.get_by_id(int(data["id"])) if data.get("id") is not None else None
        if not book:
            book = Book(id=data.get("id"))
            db.add(book)
        book.titulo = str(data["titulo"])
        book.autor = data.get("autor")
        book.descricao = data.get("descricao")
        if imagem is not None:
            book.imagem = imagem
            book.imagem_tipo = data.get("imagem_tipo") or imagem_tipo
    await db.commit()
    logger.info(f"Seeded {len(entries)} books")
    return len(entries)


async def seed_from_file(db: AsyncSession, path: str | Path) -> None:
    """Seed both tables from a YAML file."""
    path = Path(path)
    data = load_seed_file(path)
    await seed_sobre(db, data.get("sobre") or [], path.parent)
    await seed_livros(db, data.get("livros") or [], path.parent)


async def seed_all(path: str) -> None:
    """Create tables and seed from the given file."""
    logger.info(f"Starting database seeding from {path}...")
    Path(settings.data_save_folder).mkdir(parents=True, exist_ok=True)
    await create_tables()
    async with async_session_maker() as db:
        await seed_from_file(db, path)
    logger.info("Database seeding completed!")


async def clear_all() -> None:
    """Clear all data from tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    logger.info("All tables cleared and recreated")


if __name__ == "__main__":
    import sys

    if len(sys.argv) > 1 and sys.argv[1] == "--clear":
        asyncio.run(clear_all())
    elif len(sys.argv) > 1:
        asyncio.run(seed_all(sys.argv[1]))
    else:
        print("usage: python -m app.db.seed <file.yaml> | --clear")
        sys.exit(2)
