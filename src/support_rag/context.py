from __future__ import annotations

from .personal import format_profile_context
from .schema import Classification, RetrievalContext, ScoredDocument, SourceRef, UserProfile

CONTEXT_SEPARATOR = "\n\n---\n\n"


def format_general_context(ranked: list[ScoredDocument]) -> str:
    return CONTEXT_SEPARATOR.join(
        f"[Document {idx}] (Relevance: {row.score})\n{row.document.content}"
        for idx, row in enumerate(ranked, start=1)
    )


def top_sources(ranked: list[ScoredDocument], limit: int = 3) -> list[SourceRef]:
    return [SourceRef(section=row.document.section, doc_id=row.document.doc_id) for row in ranked[:limit]]


def build_context(
    classification: Classification,
    ranked: list[ScoredDocument],
    query: str,
    profile: UserProfile | None = None,
) -> RetrievalContext:
    """Assemble the per-query context consumed by the answer synthesizer.

    The personal block is rendered only for personal queries with a profile
    available; without one it stays empty and the synthesizer treats the query
    as a general one.
    """
    personal_text = ""
    if classification.is_personal_query and profile is not None:
        personal_text = format_profile_context(query, profile)

    return RetrievalContext(
        is_greeting=classification.is_greeting,
        is_personal_query=classification.is_personal_query,
        is_list_query=classification.is_list_query,
        has_relevant_docs=len(ranked) > 0,
        relevant_docs=list(ranked),
        general_context_text=format_general_context(ranked),
        personal_context_text=personal_text,
        top_sources=top_sources(ranked),
        greeting_response=classification.greeting_response,
    )
