from dataclasses import dataclass

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from audiomatch.locales import DEFAULT_LOCALE, LOCALES

logger = structlog.get_logger("audiomatch.config")


@dataclass(frozen=True)
class SearchConfig:
    max_results: int = 15
    # Stop paging once max_results * page_multiplier listings are collected.
    page_multiplier: int = 2
    max_pages: int = 5

    strict_mode: bool = False
    score_threshold: float = 50.0
    min_score: float = 20.0

    # Year given to listings whose title cannot be decomposed; None means
    # the current year at ranking time.
    fallback_year: int | None = None

    @property
    def max_listings(self) -> int:
        return self.max_results * self.page_multiplier

    @property
    def cutoff(self) -> float:
        return self.score_threshold if self.strict_mode else self.min_score


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    language: str = "pl"
    environment: str = "production"
    debug: bool = False

    max_results: int = 15
    page_multiplier: int = 2
    max_pages: int = 5
    strict_mode: bool = False
    score_threshold: float = 50.0
    min_score: float = 20.0

    # "package.module:factory" paths; the factory is called with the settings.
    # An empty enricher falls back to the passthrough enricher.
    catalog_source: str = ""
    enricher: str = ""

    @field_validator("language")
    @classmethod
    def _known_language(cls, value: str) -> str:
        code = value.strip().lower()
        if code not in LOCALES:
            logger.warning(
                "Unsupported language, falling back to default",
                language=value,
                default=DEFAULT_LOCALE.code,
            )
            return DEFAULT_LOCALE.code
        return code

    @property
    def expose_scores(self) -> bool:
        return self.environment.lower() == "development"

    def search_config(self, fallback_year: int | None = None) -> SearchConfig:
        return SearchConfig(
            max_results=self.max_results,
            page_multiplier=self.page_multiplier,
            max_pages=self.max_pages,
            strict_mode=self.strict_mode,
            score_threshold=self.score_threshold,
            min_score=self.min_score,
            fallback_year=fallback_year,
        )


settings = Settings()
