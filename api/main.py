"""
FastAPI main application for the Ebooks Catalog API.
"""

from contextlib import asynccontextmanager
from datetime import datetime

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.config import APIConfig, config
from api.middleware import RoutePathMiddleware
from api.models import ErrorResponse, HealthResponse
from api.routes import router as catalog_router
from catalog.errors import CatalogLoadError, LookupMiss
from catalog.store import Catalog
from utilities.logger import CatalogLogger

# Setup logging
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings: APIConfig = app.state.settings
    logger.info("Starting Ebooks Catalog API", port=settings.port)

    # The catalog is read once; a broken source must stop startup
    data_file = settings.get_data_file_path()
    load_logger = CatalogLogger("api.main").bind_context(data_file=str(data_file))
    try:
        app.state.catalog = Catalog.from_file(data_file)
    except CatalogLoadError as e:
        load_logger.log_catalog_failed(e.reason)
        raise
    load_logger.log_catalog_loaded(len(app.state.catalog))

    yield

    logger.info("Shutting down Ebooks Catalog API")
    app.state.catalog = None


async def lookup_miss_handler(request: Request, exc: LookupMiss):
    """Empty lookups and missing parameters answer with a plain-text 404."""
    return PlainTextResponse(exc.message, status_code=status.HTTP_404_NOT_FOUND)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Unmatched routes get the static not-found page; other errors get JSON.

    Only GET routes exist, so a path reached with another method is unmatched
    as well.
    """
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        settings: APIConfig = request.app.state.settings
        return FileResponse(
            settings.get_not_found_page_path(),
            status_code=status.HTTP_404_NOT_FOUND,
            media_type="text/html"
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=str(exc.detail),
            status_code=exc.status_code
        ).model_dump(),
        headers=exc.headers
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions."""
    settings: APIConfig = request.app.state.settings
    logger.error("Unhandled exception", error=str(exc), path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            error="Internal server error",
            detail=str(exc) if settings.debug else None,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        ).model_dump()
    )


def create_app(settings: APIConfig = config) -> FastAPI:
    """
    Build the application for the given settings.

    Routes are registered before the static mount so the mount at "/" only
    sees requests no API route matched.
    """
    app = FastAPI(
        title=settings.api_title,
        description="""
    Read-only catalog of authors and their published works.

    ## Lookups

    * **Surname**: `/api/apellido/{apellido}` matches any part of the surname
    * **Full name**: `/api/nombre_apellido/{nombre}/{apellido}`
    * **Name and surname prefix**: `/api/nombre/{nombre}?apellido=Du`
    * **Edition year**: `/api/edicion/{year}` returns works, not authors

    Lookups with no results answer 404 with a plain-text message.
    """,
        version=settings.api_version,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.catalog = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_middleware(RoutePathMiddleware)

    app.add_exception_handler(LookupMiss, lookup_miss_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check(request: Request):
        """Health check endpoint."""
        catalog = request.app.state.catalog
        return HealthResponse(
            status="healthy" if catalog is not None else "unhealthy",
            timestamp=datetime.utcnow(),
            version=settings.api_version,
            authors=len(catalog) if catalog is not None else 0
        )

    app.include_router(catalog_router)

    # Landing page and assets; html mode serves index.html for "/"
    app.mount(
        "/",
        StaticFiles(directory=settings.get_static_dir_path(), html=True),
        name="static"
    )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="info"
    )
