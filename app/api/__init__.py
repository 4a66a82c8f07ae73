"""API router initialization."""

from fastapi import APIRouter

from app.api.image import router as image_router
from app.api.livros import router as livros_router
from app.api.sobre import router as sobre_router

router = APIRouter(prefix="/api")

router.include_router(image_router, prefix="/image", tags=["Images"])
router.include_router(sobre_router, prefix="/sobre", tags=["Sobre"])
router.include_router(livros_router, prefix="/livros", tags=["Livros"])
