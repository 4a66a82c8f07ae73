"""Image API endpoint serving BLOBs stored in the database."""

from fastapi import APIRouter, Response, status
from fastapi.responses import JSONResponse
from loguru import logger

from app.core.config import get_settings
from app.core.deps import DBSession
from app.schemas.image import ImageKind
from app.services.image_service import ImageService, parse_key

settings = get_settings()

router = APIRouter()


@router.get(
    "/{type}/{id}",
    response_class=Response,
    responses={
        200: {"content": {"image/*": {}}},
        400: {"description": "Invalid type"},
        404: {"description": "Image not found"},
    },
)
async def get_image(type: str, id: str, db: DBSession) -> Response:
    """
    Serve the image of a book or timeline entry.

    - **type**: `livro` (by book id) or `sobre` (by year)
    - **id**: Record key
    """
    try:
        try:
            kind = ImageKind(type)
        except ValueError:
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"error": "Tipo inválido"},
            )

        key = parse_key(id)
        image = await ImageService(db).get_image(kind, key) if key is not None else None
        if image is None:
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"error": "Imagem não encontrada"},
            )

        return Response(
            content=image.data,
            media_type=image.content_type or settings.default_image_type,
            headers={
                "Cache-Control": f"public, max-age={settings.image_cache_max_age}, must-revalidate",
                "Pragma": "no-cache",
                "Expires": "0",
            },
        )
    except Exception:
        logger.exception(f"Erro ao servir imagem: type={type} id={id}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Erro interno do servidor"},
        )
