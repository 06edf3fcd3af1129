import logging
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.config import Settings, get_settings
from app.core.logging import setup_logging
from app.domains.artist.router import router as artist_router
from app.domains.artwork.router import router as artwork_router
from app.domains.collector.router import router as collector_router
from app.domains.submissions.router import admin_router as submissions_admin_router
from app.domains.submissions.router import router as submissions_router
from app.domains.users.router import router as users_router
from app.shared.database.seed import seed_sample_data
from app.shared.database.store import MemoryStore, get_store
from app.shared.utils.response import ErrorResponse

logger = logging.getLogger(__name__)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    logger.info(
        "Rejected %s %s: %d validation errors",
        request.method,
        request.url.path,
        len(errors),
    )
    body = ErrorResponse(message="Invalid request data", errors=errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(body),
    )


def create_app(
    settings: Optional[Settings] = None, store: Optional[MemoryStore] = None
) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    if store is None:
        store = MemoryStore(default_artwork_approved=settings.artwork_auto_approve)
        if settings.seed_sample_data:
            seed_sample_data(store)

    application = FastAPI(
        title=settings.app_name,
        description=settings.app_description,
        version=settings.app_version,
    )
    application.state.store = store
    application.state.settings = settings

    application.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Include routers
    application.include_router(artist_router, prefix=settings.api_prefix)
    application.include_router(artwork_router, prefix=settings.api_prefix)
    application.include_router(users_router, prefix=settings.api_prefix)
    application.include_router(collector_router, prefix=settings.api_prefix)
    application.include_router(submissions_router, prefix=settings.api_prefix)
    application.include_router(submissions_admin_router, prefix=settings.api_prefix)

    @application.get("/")
    async def root() -> dict[str, str]:
        return {"message": "Welcome to ArtVerse"}

    @application.get("/health")
    async def health_check(store: MemoryStore = Depends(get_store)) -> Dict[str, Any]:
        return {
            "status": "healthy",
            "environment": settings.node_env,
            "store": store.counts(),
        }

    return application


app = create_app()
