"""Sobre service for the timeline entries."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.sobre import Sobre
from app.schemas.image import ImageKind, image_url
from app.schemas.sobre import SobreDTO
from app.services.base_service import BaseService


class SobreService(BaseService[Sobre]):
    """Read access to the timeline."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Sobre)

    async def get_timeline(self) -> list[SobreDTO]:
        """Get all entries as DTOs, ordered by year ascending."""
        has_image = func.coalesce(func.length(Sobre.imagem), 0) > 0
        result = await self.db.execute(
            select(Sobre.ano, Sobre.descricao, has_image.label("has_image"))
        )
        entries = [
            SobreDTO(
                ano=row.ano,
                descricao=row.descricao,
                image_url=image_url(ImageKind.SOBRE, row.ano) if row.has_image else None,
            )
            for row in result
        ]
        entries.sort(key=lambda e: e.ano)
        return entries
