"""Sobre page: the collective's timeline."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from loguru import logger

from app.core.config import get_settings
from app.core.deps import DBSession
from app.pages.templating import templates
from app.services.sobre_service import SobreService
from app.services.timeline_service import ITEM_DURATION, STAGGER, build_timeline

settings = get_settings()

router = APIRouter()


@router.get("/sobre", response_class=HTMLResponse)
async def sobre_page(request: Request, db: DBSession) -> HTMLResponse:
    """Render the timeline page."""
    try:
        entries = await SobreService(db).get_timeline()
    except Exception:
        logger.exception("Erro ao carregar dados")
        entries = []

    items = build_timeline(
        entries,
        rows=settings.timeline_rows,
        chars_per_line=settings.timeline_chars_per_line,
    )
    return templates.TemplateResponse(
        request,
        "sobre.html",
        {
            "items": items,
            "rows": settings.timeline_rows,
            "stagger": STAGGER,
            "item_duration": ITEM_DURATION,
            "back_label": "Sobre Nós",
        },
    )
