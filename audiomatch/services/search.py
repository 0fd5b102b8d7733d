import asyncio

import structlog

from audiomatch.interfaces.enrichment import MetadataEnricher
from audiomatch.models import EnrichedRecord, ScoredCandidate, SearchQuery
from audiomatch.services.aggregator import CandidateAggregator

logger = structlog.get_logger("audiomatch.search")


class SearchService:
    def __init__(
        self,
        aggregator: CandidateAggregator,
        enricher: MetadataEnricher,
        language: str | None = None,
    ) -> None:
        self._aggregator = aggregator
        self._enricher = enricher
        self._language = language

    async def search(self, query: SearchQuery) -> list[EnrichedRecord]:
        candidates = await self._aggregator.search(query)
        records = await asyncio.gather(*(self._enrich(c) for c in candidates))
        logger.info("Returning results", count=len(records))
        return list(records)

    async def _enrich(self, candidate: ScoredCandidate) -> EnrichedRecord:
        try:
            record = await self._enricher.enrich(candidate)
        except Exception as e:
            logger.warning(
                "Metadata enrichment failed",
                title=candidate.title,
                error=str(e),
            )
            return EnrichedRecord.from_candidate(candidate, self._language)
        return record.model_copy(update={"score": candidate.score})
