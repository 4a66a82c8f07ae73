"""Timeline (Sobre) API endpoints."""

from fastapi import APIRouter

from app.core.deps import DBSession
from app.schemas.sobre import SobreDTO
from app.services.sobre_service import SobreService

router = APIRouter()


@router.get("", response_model=list[SobreDTO])
async def get_sobre(db: DBSession) -> list[SobreDTO]:
    """Get all timeline entries, ordered by year."""
    return await SobreService(db).get_timeline()
