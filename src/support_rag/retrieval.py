from __future__ import annotations

import logging
from collections.abc import Iterable

from .corpus import Corpus
from .patterns import DEFAULT_WEIGHTS, ScoringWeights
from .schema import Document, ScoredDocument
from .scoring import score_document

logger = logging.getLogger(__name__)


def rank_documents(
    query: str, documents: Iterable[Document], weights: ScoringWeights = DEFAULT_WEIGHTS
) -> list[ScoredDocument]:
    """Score documents and sort them by descending score, keeping corpus order on ties."""
    scored = [ScoredDocument(document=document, score=score_document(query, document, weights)) for document in documents]
    return sorted(scored, key=lambda row: row.score, reverse=True)


def top_k_search(
    query: str, corpus: Corpus, top_k: int = 3, weights: ScoringWeights = DEFAULT_WEIGHTS
) -> list[ScoredDocument]:
    """Return at most `top_k` documents with a positive score."""
    ranked = rank_documents(query, corpus, weights)
    return [row for row in ranked if row.score > 0][:top_k]


def enumerate_events(query: str, corpus: Corpus, weights: ScoringWeights = DEFAULT_WEIGHTS) -> list[ScoredDocument]:
    """Return every event document ranked by score, including zero scores."""
    return rank_documents(query, corpus.event_documents(), weights)


def retrieve(
    query: str,
    corpus: Corpus,
    top_k: int = 3,
    list_mode: bool = False,
    list_top_k: int = 15,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> list[ScoredDocument]:
    """Retrieve ranked documents for one query.

    Args:
        query: Raw user query.
        corpus: Corpus to search.
        top_k: Result cap in standard mode.
        list_mode: Enumerate every event document instead of taking a top-k.
        list_top_k: Widened cap used when list mode finds no event documents.
        weights: Scoring weights.

    Returns:
        Scored documents, highest score first.
    """
    if list_mode:
        events = enumerate_events(query, corpus, weights)
        if events:
            logger.debug("Enumerating %d event documents for list query", len(events))
            return events
        logger.debug("No event documents in corpus; falling back to top-%d search", list_top_k)
        return top_k_search(query, corpus, top_k=list_top_k, weights=weights)

    results = top_k_search(query, corpus, top_k=top_k, weights=weights)
    logger.debug(
        "Retrieved %d documents: %s",
        len(results),
        [(row.document.section, row.score) for row in results],
    )
    return results
