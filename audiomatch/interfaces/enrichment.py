from abc import ABC, abstractmethod

from audiomatch.models import EnrichedRecord, ScoredCandidate


class MetadataEnricher(ABC):
    @abstractmethod
    async def enrich(self, candidate: ScoredCandidate) -> EnrichedRecord:
        ...
