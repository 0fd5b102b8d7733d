import re

from rapidfuzz.distance import Levenshtein

from audiomatch.matching.normalizer import normalize

WHOLE_WORD_POINTS = 30
SUBSTRING_POINTS = 15
MIN_KEYWORD_LENGTH = 2


def string_similarity(a: str, b: str) -> float:
    norm_a = normalize(a)
    norm_b = normalize(b)
    if norm_a == norm_b:
        return 100.0

    max_len = max(len(norm_a), len(norm_b))
    distance = Levenshtein.distance(norm_a, norm_b)
    return max(0.0, (max_len - distance) / max_len * 100)


def keyword_overlap(text: str, query: str) -> float:
    norm_text = normalize(text)
    norm_query = normalize(query)
    if not norm_query:
        return 0.0

    points = 0
    for keyword in norm_query.split():
        if len(keyword) < MIN_KEYWORD_LENGTH or keyword not in norm_text:
            continue
        if re.search(rf"\b{re.escape(keyword)}\b", norm_text):
            points += WHOLE_WORD_POINTS
        else:
            points += SUBSTRING_POINTS
    return float(min(points, 100))
