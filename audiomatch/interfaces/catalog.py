from abc import ABC, abstractmethod

from audiomatch.models import CatalogPage


class CatalogSource(ABC):
    @abstractmethod
    async def fetch_page(self, query: str, page: int) -> CatalogPage:
        ...
