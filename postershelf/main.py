"""
Postershelf - FastAPI application serving the poster catalog

Read-only listing API:
- Enumerates poster files from the configured directories
- Free-text search with tiered relevance ranking
- Default display order: natural alphabetical or newest first
- Pagination

Run:
    python -m postershelf.main
"""

import logging
import os
from datetime import datetime
from typing import List, Optional

from fastapi import FastAPI, Query, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from . import APP_VERSION
from .catalog import format_directory_name, list_posters, paginate
from .config import AppConfig, load_config
from .logging_config import setup_logging
from .models import SortMode
from .search import arrange_posters
from .search.ordering import resolve_mode
from .search.tags import cleaned_name
from .transliteration import get_transliterator

logger = logging.getLogger(__name__)


# Response models
class HealthResponse(BaseModel):
    status: str
    version: str
    started_at: str
    uptime_seconds: float
    transliterator: str


class DirectoryInfo(BaseModel):
    key: str
    name: str


class DirectoryListResponse(BaseModel):
    directories: List[DirectoryInfo]


class PosterInfo(BaseModel):
    filename: str
    directory: str
    title: str = Field(..., description="Display name with tags and timestamps removed")


class PosterListResponse(BaseModel):
    query: str
    directory: str
    sort: Optional[SortMode] = Field(None, description="Applied default order (null while searching)")
    items: List[PosterInfo]
    page: int
    total_pages: int
    total: int


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Application configuration (default: loaded from environment)
    """
    if config is None:
        config = load_config()

    transliterator = get_transliterator(config.transliterator)
    started_at = datetime.utcnow()

    app = FastAPI(
        title=f"{config.site_title} API",
        description="Personal media-poster catalog",
        version=APP_VERSION,
    )
    app.state.config = config
    app.state.transliterator = transliterator

    @app.get("/", response_model=dict)
    async def root():
        """Root endpoint"""
        return {
            "service": config.site_title,
            "version": APP_VERSION,
            "status": "running",
            "docs": "/docs",
        }

    @app.get("/health", response_model=HealthResponse)
    async def health():
        """Health check endpoint"""
        uptime = (datetime.utcnow() - started_at).total_seconds()
        return HealthResponse(
            status="healthy",
            version=APP_VERSION,
            started_at=started_at.isoformat() + "Z",
            uptime_seconds=round(uptime, 2),
            transliterator=transliterator.name,
        )

    @app.get("/v1/directories", response_model=DirectoryListResponse)
    async def directories():
        """Configured poster directories with display names"""
        return DirectoryListResponse(
            directories=[
                DirectoryInfo(key=key, name=format_directory_name(key))
                for key in config.catalog.directories
            ]
        )

    @app.get("/v1/posters", response_model=PosterListResponse)
    def posters(
        search: str = Query("", description="Free-text query; 'orphaned' lists posters not tagged --Plex--"),
        directory: str = Query("", description="Directory key filter (empty = all)"),
        page: int = Query(1, description="1-based page, clamped to the available range"),
        sort: Optional[SortMode] = Query(None, description="Override default order: alpha | date"),
    ):
        """
        List posters: search results by relevance, otherwise the default order.

        Search results are ordered by relevance only; `sort` applies to the
        default listing.
        """
        items = list_posters(config.catalog, directory)
        if directory not in config.catalog.directories:
            directory = ""

        searching = bool(search.strip())
        ordered = arrange_posters(items, search, config.display, sort, transliterator)
        result_page = paginate(ordered, page, config.catalog.images_per_page)

        logger.info(
            f"Listing: query={search.strip()!r} directory={directory or 'all'} "
            f"→ {result_page.total} posters, page {result_page.page}/{result_page.total_pages}"
        )

        return PosterListResponse(
            query=search.strip(),
            directory=directory,
            sort=None if searching else resolve_mode(config.display, sort),
            items=[
                PosterInfo(
                    filename=item.filename,
                    directory=item.directory,
                    title=cleaned_name(item.filename),
                )
                for item in result_page.items
            ],
            page=result_page.page,
            total_pages=result_page.total_pages,
            total=result_page.total,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler"""
        logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error",
                "detail": str(exc),
            },
        )

    return app


def run():
    """Configure logging and serve the API with uvicorn."""
    import uvicorn

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    setup_logging(console_level=getattr(logging, log_level, logging.INFO))

    uvicorn.run(
        "postershelf.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8080")),
    )


if __name__ == "__main__":
    run()
