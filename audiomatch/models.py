from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from audiomatch.matching.normalizer import normalize


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        serialize_by_alias=True,
    )


class FrozenCamelModel(CamelModel):
    model_config = ConfigDict(frozen=True)


class RawListing(FrozenCamelModel):
    external_id: str
    title: str
    authors: list[str] = Field(min_length=1)
    detail_url: str
    cover_url: str = ""
    rating: float | None = None


class CatalogPage(FrozenCamelModel):
    listings: list[RawListing] = []
    has_more: bool = False


class TitleComponents(FrozenCamelModel):
    authors: list[str]
    clean_title: str
    year: int | None = None


class ScoredCandidate(RawListing):
    clean_title: str
    year: int | None = None
    score: float = 0.0

    @property
    def dedup_key(self) -> tuple[str, str]:
        return normalize(self.clean_title), normalize(self.authors[0])


class EnrichedRecord(ScoredCandidate):
    narrator: str | None = None
    publisher: str | None = None
    description: str | None = None
    genres: list[str] | None = None
    duration: int | None = None
    published_year: int | None = None
    language: str | None = None

    @classmethod
    def from_candidate(
        cls, candidate: ScoredCandidate, language: str | None = None
    ) -> "EnrichedRecord":
        return cls(
            **candidate.model_dump(by_alias=False),
            published_year=candidate.year,
            language=language,
        )


class SearchQuery(FrozenCamelModel):
    text: str
    author_filter: str | None = None
    page: int = Field(default=1, ge=1)

    @field_validator("text")
    @classmethod
    def _text_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("query text must not be empty")
        return value

    @field_validator("author_filter")
    @classmethod
    def _blank_author_is_absent(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()


class SearchMatch(CamelModel):
    title: str
    author: str
    narrator: str | None = None
    publisher: str | None = None
    published_year: str | None = None
    description: str | None = None
    cover: str | None = None
    genres: list[str] | None = None
    language: str | None = None
    duration: int | None = None
    rating: float | None = None
    detail_url: str
    match_score: str | None = None

    @classmethod
    def from_record(cls, record: EnrichedRecord, include_score: bool = False) -> "SearchMatch":
        return cls(
            title=record.clean_title or record.title,
            author=", ".join(record.authors),
            narrator=record.narrator or None,
            publisher=record.publisher or None,
            published_year=str(record.published_year) if record.published_year else None,
            description=record.description or None,
            cover=record.cover_url or None,
            genres=record.genres or None,
            language=record.language,
            duration=record.duration,
            rating=record.rating,
            detail_url=record.detail_url,
            match_score=f"{record.score:.2f}" if include_score else None,
        )


class SearchResponse(CamelModel):
    matches: list[SearchMatch] = []


class HealthResponse(CamelModel):
    status: str
    version: str
