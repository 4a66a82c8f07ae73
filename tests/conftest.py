"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.deps import get_db
from app.db.base import Base
from app.db import models_registry  # noqa: F401 - Import to register models
from app.main import app
from app.models.book import Book
from app.models.sobre import Sobre
from tests.samples import JPEG_BYTES, LONG_TEXT, PNG_BYTES

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        future=True,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async_session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session_maker() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client with overridden dependencies."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def sample_sobre(db_session: AsyncSession) -> list[Sobre]:
    """Create timeline entries, inserted out of year order."""
    entries = [
        Sobre(
            ano=2021,
            descricao="Lançamento da primeira antologia.",
            imagem=PNG_BYTES,
            imagem_tipo="image/png",
        ),
        Sobre(
            ano=2018,
            descricao=LONG_TEXT,
        ),
        Sobre(
            ano=2019,
            descricao="Primeiro sarau na periferia.",
            imagem=b"",
            imagem_tipo="image/png",
        ),
    ]

    for entry in entries:
        db_session.add(entry)
    await db_session.commit()

    return entries


@pytest_asyncio.fixture(scope="function")
async def sample_books(db_session: AsyncSession) -> list[Book]:
    """Create books, one with a cover stored without MIME type."""
    books = [
        Book(
            id=1,
            titulo="Vozes da Margem",
            autor="Coletivo À Margem",
            imagem=JPEG_BYTES,
            imagem_tipo=None,
        ),
        Book(
            id=2,
            titulo="Cadernos de Rua",
            descricao="Poemas escritos nas oficinas.",
        ),
    ]

    for book in books:
        db_session.add(book)
    await db_session.commit()

    return books
