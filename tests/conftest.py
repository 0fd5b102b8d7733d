import pytest

from audiomatch.interfaces.catalog import CatalogSource
from audiomatch.interfaces.enrichment import MetadataEnricher
from audiomatch.models import CatalogPage, EnrichedRecord, RawListing, ScoredCandidate


def make_listing(
    title: str,
    authors: list[str] | None = None,
    external_id: str | None = None,
    rating: float | None = None,
) -> RawListing:
    external_id = external_id or title.lower().replace(" ", "-")
    return RawListing(
        external_id=external_id,
        title=title,
        authors=authors or ["Jan Kowalski"],
        detail_url=f"https://audioteka.com/pl/audiobook/{external_id}",
        cover_url=f"https://static.audioteka.com/{external_id}.jpg",
        rating=rating,
    )


class MockCatalogSource(CatalogSource):
    def __init__(
        self,
        pages: list[CatalogPage] | None = None,
        error_on_page: int | None = None,
        endless: bool = False,
    ):
        self._pages = pages or []
        self._error_on_page = error_on_page
        self._endless = endless
        self.requested_pages: list[int] = []

    async def fetch_page(self, query: str, page: int) -> CatalogPage:
        self.requested_pages.append(page)
        if page == self._error_on_page:
            raise RuntimeError("catalog unavailable")
        if self._endless:
            return CatalogPage(
                listings=[make_listing(f"Autor {page} - Tytuł {page} (2020)")],
                has_more=True,
            )
        index = len(self.requested_pages) - 1
        if index >= len(self._pages):
            return CatalogPage()
        return self._pages[index]


class MockEnricher(MetadataEnricher):
    def __init__(self, narrator: str = "Krzysztof Gosztyła", fail_for: set[str] | None = None):
        self._narrator = narrator
        self._fail_for = fail_for or set()
        self.enriched: list[str] = []

    async def enrich(self, candidate: ScoredCandidate) -> EnrichedRecord:
        if candidate.external_id in self._fail_for:
            raise RuntimeError("detail page unavailable")
        self.enriched.append(candidate.external_id)
        return EnrichedRecord.from_candidate(candidate, "polish").model_copy(
            update={"narrator": self._narrator, "score": 0.0}
        )


def catalog_factory(settings) -> MockCatalogSource:
    return MockCatalogSource()


@pytest.fixture
def sample_listings() -> list[RawListing]:
    return [
        make_listing(
            "Jan Kowalski - Wielka Podróż (2021) [audiobook PL]",
            external_id="wielka-podroz",
            rating=4.6,
        ),
        make_listing(
            "Anna Nowak - Wielka Podróż Dookoła Świata (2019) [audiobook PL]",
            authors=["Anna Nowak"],
            external_id="wielka-podroz-dookola-swiata",
        ),
        make_listing(
            "Piotr Wiśniewski - Zupełnie Inna Historia (2018) [audiobook PL]",
            authors=["Piotr Wiśniewski"],
            external_id="zupelnie-inna-historia",
        ),
    ]


@pytest.fixture
def sample_candidate() -> ScoredCandidate:
    return ScoredCandidate(
        external_id="wielka-podroz",
        title="Jan Kowalski - Wielka Podróż (2021) [audiobook PL]",
        authors=["Jan Kowalski"],
        detail_url="https://audioteka.com/pl/audiobook/wielka-podroz",
        cover_url="https://static.audioteka.com/wielka-podroz.jpg",
        rating=4.6,
        clean_title="Wielka Podróż",
        year=2021,
        score=300.0,
    )
