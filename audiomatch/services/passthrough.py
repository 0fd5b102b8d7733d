from audiomatch.interfaces.enrichment import MetadataEnricher
from audiomatch.models import EnrichedRecord, ScoredCandidate


class PassthroughEnricher(MetadataEnricher):
    def __init__(self, language: str | None = None) -> None:
        self._language = language

    async def enrich(self, candidate: ScoredCandidate) -> EnrichedRecord:
        return EnrichedRecord.from_candidate(candidate, self._language)
