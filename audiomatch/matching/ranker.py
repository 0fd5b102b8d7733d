from audiomatch.matching.normalizer import normalize
from audiomatch.matching.similarity import keyword_overlap, string_similarity
from audiomatch.models import TitleComponents

TITLE_WEIGHT = 0.5
KEYWORD_WEIGHT = 0.25
AUTHOR_WEIGHT = 0.25

WEAK_TITLE_SIMILARITY = 80
WEAK_KEYWORD_OVERLAP = 50
WEAK_MATCH_FACTOR = 0.3

EXACT_TITLE_BONUS = 100
PREFIX_BONUS = 50
NEAR_EXACT_THRESHOLD = 95
NEAR_EXACT_TITLE_BONUS = 75
NEAR_EXACT_AUTHOR_BONUS = 50

SHORT_QUERY_LENGTH = 3
SHORT_QUERY_FACTOR = 0.5

ALL_WORDS_MIN_LENGTH = 3
ALL_WORDS_BONUS = 40

MAX_SCORE = 300.0


def score_match(
    components: TitleComponents, query: str, author_filter: str | None = None
) -> float:
    norm_title = normalize(components.clean_title)
    norm_query = normalize(query)
    norm_author = normalize(author_filter) if author_filter else ""

    title_similarity = string_similarity(norm_title, norm_query)
    keyword_score = keyword_overlap(norm_title, norm_query)
    score = title_similarity * TITLE_WEIGHT + keyword_score * KEYWORD_WEIGHT

    author_similarity = 0.0
    if norm_author:
        author_similarity = max(
            (string_similarity(author, norm_author) for author in components.authors),
            default=0.0,
        )
        score += author_similarity * AUTHOR_WEIGHT

    if title_similarity < WEAK_TITLE_SIMILARITY and keyword_score < WEAK_KEYWORD_OVERLAP:
        score *= WEAK_MATCH_FACTOR

    if norm_title and norm_title == norm_query:
        score += EXACT_TITLE_BONUS

    if norm_title and norm_query and (
        norm_title.startswith(norm_query) or norm_query.startswith(norm_title)
    ):
        score += PREFIX_BONUS

    if title_similarity >= NEAR_EXACT_THRESHOLD:
        score += NEAR_EXACT_TITLE_BONUS

    if norm_author and author_similarity >= NEAR_EXACT_THRESHOLD:
        score += NEAR_EXACT_AUTHOR_BONUS

    if len(norm_query) < SHORT_QUERY_LENGTH:
        score *= SHORT_QUERY_FACTOR

    if _all_words_matched(norm_title, norm_query):
        score += ALL_WORDS_BONUS

    return min(max(score, 0.0), MAX_SCORE)


def _all_words_matched(norm_title: str, norm_query: str) -> bool:
    query_words = [w for w in norm_query.split() if len(w) >= ALL_WORDS_MIN_LENGTH]
    if not query_words:
        return False
    title_words = norm_title.split()
    return all(
        any(word in title_word or title_word in word for title_word in title_words)
        for word in query_words
    )
