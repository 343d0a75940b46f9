"""Tests for context.py: general context text, sources and personal block."""
from __future__ import annotations

from support_rag.context import CONTEXT_SEPARATOR, build_context, format_general_context, top_sources
from support_rag.schema import Classification, Document, ScoredDocument, SourceRef


def _row(doc_id: str, section: str, score: int, content: str = "text") -> ScoredDocument:
    return ScoredDocument(document=Document(doc_id=doc_id, section=section, content=content), score=score)


# ---------------------------------------------------------------------------
# format_general_context
# ---------------------------------------------------------------------------

class TestFormatGeneralContext:
    def test_numbered_blocks_with_relevance(self):
        ranked = [_row("a", "A", 9, "alpha"), _row("b", "B", 4, "beta")]
        assert format_general_context(ranked) == (
            "[Document 1] (Relevance: 9)\nalpha" + CONTEXT_SEPARATOR + "[Document 2] (Relevance: 4)\nbeta"
        )

    def test_empty(self):
        assert format_general_context([]) == ""


# ---------------------------------------------------------------------------
# top_sources
# ---------------------------------------------------------------------------

class TestTopSources:
    def test_limited_to_three(self):
        ranked = [_row(str(idx), f"S{idx}", 10 - idx) for idx in range(5)]
        assert top_sources(ranked) == [SourceRef("S0", "0"), SourceRef("S1", "1"), SourceRef("S2", "2")]

    def test_fewer_than_limit(self):
        assert top_sources([_row("a", "A", 1)]) == [SourceRef("A", "a")]


# ---------------------------------------------------------------------------
# build_context
# ---------------------------------------------------------------------------

class TestBuildContext:
    def test_general_query(self):
        ranked = [_row("a", "Registration", 9)]
        context = build_context(Classification(), ranked, "how to register")
        assert context.has_relevant_docs
        assert context.relevant_docs == ranked
        assert context.personal_context_text == ""
        assert context.top_sources == [SourceRef("Registration", "a")]

    def test_no_docs(self):
        context = build_context(Classification(), [], "zzzz")
        assert not context.has_relevant_docs
        assert context.general_context_text == ""
        assert context.top_sources == []

    def test_personal_query_with_profile(self, sample_profile):
        context = build_context(Classification(is_personal_query=True), [], "my certificates", sample_profile)
        assert "Total Certificates Earned: 2" in context.personal_context_text

    def test_personal_query_without_profile(self):
        context = build_context(Classification(is_personal_query=True), [], "my certificates", None)
        assert context.personal_context_text == ""

    def test_profile_ignored_for_general_query(self, sample_profile):
        context = build_context(Classification(), [], "refund policy", sample_profile)
        assert context.personal_context_text == ""

    def test_greeting_response_carried(self):
        classification = Classification(is_greeting=True, greeting_response="Hello!")
        context = build_context(classification, [], "hello")
        assert context.is_greeting
        assert context.greeting_response == "Hello!"

    def test_relevant_docs_is_a_copy(self):
        ranked = [_row("a", "A", 1)]
        context = build_context(Classification(), ranked, "q")
        context.relevant_docs.clear()
        assert len(ranked) == 1
