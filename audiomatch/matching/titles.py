import re
from functools import lru_cache

from audiomatch.locales import DEFAULT_LOCALE, Locale
from audiomatch.models import RawListing, TitleComponents

_TAG = r"\s*(?:\[[^\]]*\])?\s*$"

TITLE_PATTERNS = (
    re.compile(r"^(?P<authors>.*?)\s+-\s+(?P<title>.+?)\s*\((?P<year>\d{4})\)" + _TAG),
    re.compile(r"^(?P<authors>.*?)\s+-\s+(?P<title>.+?)" + _TAG),
)


@lru_cache(maxsize=None)
def _author_separator(conjunctions: tuple[str, ...]) -> re.Pattern[str]:
    # Longest first so "a také" wins over "a".
    words = sorted(conjunctions, key=len, reverse=True)
    alternatives = "|".join(r"\s+".join(map(re.escape, w.split())) for w in words)
    return re.compile(rf"\s*,\s*|\s+(?:{alternatives})\s+", re.IGNORECASE)


def split_authors(author_list: str, locale: Locale = DEFAULT_LOCALE) -> list[str]:
    separator = _author_separator(locale.author_conjunctions)
    return [name.strip() for name in separator.split(author_list) if name.strip()]


def decompose(raw_title: str, locale: Locale = DEFAULT_LOCALE) -> TitleComponents | None:
    for pattern in TITLE_PATTERNS:
        match = pattern.match(raw_title.strip())
        if not match:
            continue
        authors = split_authors(match.group("authors"), locale)
        if not authors:
            return None
        year = match.groupdict().get("year")
        return TitleComponents(
            authors=authors,
            clean_title=match.group("title").strip(),
            year=int(year) if year else None,
        )
    return None


def components_or_fallback(
    listing: RawListing,
    fallback_year: int | None = None,
    locale: Locale = DEFAULT_LOCALE,
) -> TitleComponents:
    components = decompose(listing.title, locale)
    if components is not None:
        return components
    return TitleComponents(
        authors=list(listing.authors),
        clean_title=listing.title,
        year=fallback_year,
    )
