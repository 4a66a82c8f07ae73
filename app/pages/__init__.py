"""Server-rendered HTML pages."""

from fastapi import APIRouter

from app.pages.sobre import router as sobre_router

router = APIRouter()
router.include_router(sobre_router, tags=["Pages"])
