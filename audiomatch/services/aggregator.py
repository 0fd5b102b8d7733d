from datetime import date

import structlog

from audiomatch.config import SearchConfig
from audiomatch.interfaces.catalog import CatalogSource
from audiomatch.locales import DEFAULT_LOCALE, Locale
from audiomatch.matching.ranker import score_match
from audiomatch.matching.titles import components_or_fallback
from audiomatch.models import RawListing, ScoredCandidate, SearchQuery

logger = structlog.get_logger("audiomatch.aggregator")


class CandidateAggregator:
    def __init__(
        self,
        catalog: CatalogSource,
        config: SearchConfig | None = None,
        locale: Locale = DEFAULT_LOCALE,
    ) -> None:
        self._catalog = catalog
        self._config = config or SearchConfig()
        self._locale = locale

    @property
    def config(self) -> SearchConfig:
        return self._config

    async def search(self, query: SearchQuery) -> list[ScoredCandidate]:
        logger.info(
            "Searching catalog",
            query=query.text,
            author=query.author_filter,
            page=query.page,
        )
        listings = await self.collect(query.text, query.page)
        logger.info("Collected initial matches", count=len(listings))

        ranked = self.rank(listings, query.text, query.author_filter)
        logger.info(
            "Ranked matches",
            count=len(ranked),
            cutoff=self._config.cutoff,
            top_scores=[
                {"title": c.clean_title, "score": round(c.score, 2)} for c in ranked[:3]
            ],
        )
        return ranked

    async def collect(self, query: str, start_page: int = 1) -> list[RawListing]:
        listings: list[RawListing] = []
        page = start_page
        pages_fetched = 0

        while pages_fetched < self._config.max_pages and len(listings) < self._config.max_listings:
            try:
                result = await self._catalog.fetch_page(query, page)
            except Exception as e:
                logger.warning("Catalog page fetch failed", page=page, error=str(e))
                break
            pages_fetched += 1
            listings.extend(result.listings)
            logger.debug(
                "Fetched catalog page",
                page=page,
                listings=len(result.listings),
                has_more=result.has_more,
            )
            if not result.has_more or not result.listings:
                break
            page += 1

        return listings

    def rank(
        self,
        listings: list[RawListing],
        query: str,
        author_filter: str | None = None,
    ) -> list[ScoredCandidate]:
        seen: set[tuple[str, str]] = set()
        candidates: list[ScoredCandidate] = []
        fallback_year = self._config.fallback_year
        if fallback_year is None:
            fallback_year = date.today().year

        for listing in listings:
            components = components_or_fallback(listing, fallback_year, self._locale)
            candidate = ScoredCandidate(
                **listing.model_dump(by_alias=False, exclude={"authors"}),
                authors=components.authors,
                clean_title=components.clean_title,
                year=components.year,
                score=score_match(components, query, author_filter),
            )
            if candidate.dedup_key in seen:
                continue
            seen.add(candidate.dedup_key)
            candidates.append(candidate)

        candidates = sorted(candidates, key=lambda c: c.score, reverse=True)
        cutoff = self._config.cutoff
        return [c for c in candidates if c.score > cutoff][: self._config.max_results]
