from __future__ import annotations

import re

from .patterns import DEFAULT_WEIGHTS, ScoringWeights
from .schema import Document

_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Lowercase, replace punctuation with spaces, and collapse whitespace."""
    cleaned = _NON_WORD.sub(" ", text.lower())
    return _WHITESPACE.sub(" ", cleaned).strip()


def query_terms(query: str, min_length: int = DEFAULT_WEIGHTS.min_token_length) -> list[str]:
    """Return normalized query tokens long enough to count as content terms."""
    return [token for token in normalize_text(query).split(" ") if len(token) >= min_length]


def score_document(query: str, document: Document, weights: ScoringWeights = DEFAULT_WEIGHTS) -> int:
    """Score one document against a query with keyword-weighted overlap.

    Contributions, summed:

    - `keyword_hit` for each document keyword contained in the lowercased query.
    - `content_word_hit` for each long query token present among the content words.
    - `keyword_overlap` for each long query token that contains, or is contained
      by, any keyword. This overlaps with the first rule on purpose.
    - `section_hit` when the lowercased section label occurs in the query.

    Missing content, keywords or section only remove their contributions; the
    function never raises for a well-typed document.

    Args:
        query: Raw user query.
        document: Corpus document to score.
        weights: Point values and the minimum token length.

    Returns:
        Non-negative integer relevance score.
    """
    query_lower = query.lower()
    keywords = [keyword.lower() for keyword in document.keywords or () if keyword]
    content_words = set(normalize_text(document.content or "").split(" "))

    score = 0
    for keyword in keywords:
        if keyword in query_lower:
            score += weights.keyword_hit

    for token in query_terms(query, weights.min_token_length):
        if token in content_words:
            score += weights.content_word_hit
        if any(token in keyword or keyword in token for keyword in keywords):
            score += weights.keyword_overlap

    section = (document.section or "").lower()
    if section and section in query_lower:
        score += weights.section_hit

    return score
