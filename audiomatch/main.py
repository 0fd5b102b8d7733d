import importlib
from contextlib import asynccontextmanager
from typing import Any

import structlog
from fastapi import FastAPI, HTTPException, Query

from audiomatch.config import Settings, settings
from audiomatch.locales import get_locale
from audiomatch.logging import setup_logging
from audiomatch.models import HealthResponse, SearchMatch, SearchQuery, SearchResponse
from audiomatch.services.aggregator import CandidateAggregator
from audiomatch.services.passthrough import PassthroughEnricher
from audiomatch.services.search import SearchService

VERSION = "0.1.0"

logger = structlog.get_logger("audiomatch.main")

search_service: SearchService | None = None
expose_scores = False


def load_factory(path: str) -> Any:
    """Resolve a ``"package.module:attribute"`` path."""
    module_name, _, attribute = path.partition(":")
    if not module_name or not attribute:
        raise ValueError(f"Expected 'module:attribute', got {path!r}")
    return getattr(importlib.import_module(module_name), attribute)


def build_search_service(settings: Settings) -> SearchService | None:
    if not settings.catalog_source:
        logger.warning("No catalog source configured; /search is disabled")
        return None

    locale = get_locale(settings.language)
    catalog = load_factory(settings.catalog_source)(settings)
    if settings.enricher:
        enricher = load_factory(settings.enricher)(settings)
    else:
        enricher = PassthroughEnricher(locale.language_name)

    aggregator = CandidateAggregator(catalog, settings.search_config(), locale)
    return SearchService(aggregator, enricher, locale.language_name)


@asynccontextmanager
async def lifespan(app: FastAPI):
    global search_service, expose_scores
    setup_logging(settings.debug)
    search_service = build_search_service(settings)
    expose_scores = settings.expose_scores
    logger.info("Audiobook search ready", language=settings.language)
    yield
    search_service = None


app = FastAPI(title="Audiobook Catalog Matcher", version=VERSION, lifespan=lifespan)


@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="healthy", version=VERSION)


@app.get("/search", response_model=SearchResponse, response_model_exclude_none=True)
async def search(
    query: str = "",
    author: str = "",
    page: int = Query(default=1, ge=1),
):
    if not query.strip():
        raise HTTPException(status_code=400, detail="Query parameter is required")
    if search_service is None:
        raise HTTPException(status_code=503, detail="No catalog source configured")

    records = await search_service.search(
        SearchQuery(text=query, author_filter=author, page=page)
    )
    return SearchResponse(
        matches=[SearchMatch.from_record(r, include_score=expose_scores) for r in records]
    )
