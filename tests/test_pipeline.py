"""Tests for pipeline.py: end-to-end answers through ChatEngine and answer().

All queries run against the bundled sample corpus; greeting replies come from a
seeded random source and are checked by membership.
"""
from __future__ import annotations

import random
from unittest.mock import MagicMock

import pytest

from support_rag.patterns import GREETING_GROUPS, TOPIC_MENU_FALLBACK
from support_rag.pipeline import ChatEngine, answer
from support_rag.schema import Certificate, UserProfile
from support_rag.settings import EngineSettings


# ---------------------------------------------------------------------------
# Reference scenarios
# ---------------------------------------------------------------------------

class TestScenarios:
    def test_registration_how_to(self, engine):
        result = engine.answer("How do I register for an event?")
        assert result.is_from_knowledge_base
        assert "Registration" in result.sources
        assert "1. Browse available events in the Events section" in result.text
        assert result.text.startswith("Here's what you need to know about **Registration**:")

    def test_greeting(self, engine):
        result = engine.answer("hi")
        assert result.text in GREETING_GROUPS[0].responses
        assert result.sources == []
        assert not result.is_from_knowledge_base

    def test_all_events_list(self, engine):
        result = engine.answer("give me all the events list")
        assert result.is_from_knowledge_base
        assert result.text.startswith("Here are all **12 events** currently available for registration:")
        assert "**12. " in result.text
        assert "**Fee Structure**: 5 Free, 7 Paid" in result.text

    def test_certificate_count(self, engine):
        profile = UserProfile(
            name="Test User",
            certificates=(
                Certificate(event_name="Alpha Workshop", issued_date="2026-01-10"),
                Certificate(event_name="Beta Seminar", issued_date="2026-02-11"),
            ),
        )
        result = engine.answer("how many certificates do I have", profile)
        assert "**2 certificates**" in result.text
        assert "Alpha Workshop" in result.text
        assert "Beta Seminar" in result.text
        assert not result.is_from_knowledge_base

    def test_gibberish_gives_topic_menu(self, engine):
        result = engine.answer("asdkjaskd random gibberish")
        assert result.text == TOPIC_MENU_FALLBACK
        assert result.sources == []
        assert not result.is_from_knowledge_base


# ---------------------------------------------------------------------------
# ChatEngine behaviour
# ---------------------------------------------------------------------------

class TestChatEngine:
    @pytest.mark.parametrize(
        "query",
        [
            "What is the refund policy?",
            "give me all the events list",
            "how many certificates do I have",
            "asdkjaskd random gibberish",
        ],
    )
    def test_non_greeting_answers_are_deterministic(self, engine, sample_profile, query):
        assert engine.answer(query, sample_profile) == engine.answer(query, sample_profile)

    def test_sample_profile_certificates(self, engine, sample_profile):
        result = engine.answer("how many certificates do I have", sample_profile)
        assert "Python Workshop" in result.text
        assert "Git & GitHub Session" in result.text

    def test_personal_query_without_profile_falls_back_to_documents(self, engine):
        result = engine.answer("how many certificates do I have")
        assert result.is_from_knowledge_base
        assert "Certificates" in result.sources

    def test_personal_query_without_profile_or_documents(self, engine):
        assert engine.answer("my stuff").text == TOPIC_MENU_FALLBACK

    @pytest.mark.parametrize("query", ["", "   ", "\n\t"])
    def test_empty_query_gives_topic_menu(self, engine, query):
        assert engine.answer(query).text == TOPIC_MENU_FALLBACK

    def test_top_k_from_settings(self, sample_corpus):
        engine = ChatEngine(sample_corpus, settings=EngineSettings(top_k=1))
        context = engine.retrieve_context("How do I register for an event?")
        assert len(context.relevant_docs) == 1

    def test_standard_mode_bounded_by_top_k(self, engine):
        context = engine.retrieve_context("event registration certificate attendance refund fee payment")
        assert len(context.relevant_docs) <= 3

    def test_greeting_skips_retrieval(self, engine):
        context = engine.retrieve_context("hello")
        assert context.is_greeting
        assert context.relevant_docs == []

    def test_seed_from_settings(self, sample_corpus):
        first = ChatEngine(sample_corpus, settings=EngineSettings(greeting_seed=11))
        second = ChatEngine(sample_corpus, settings=EngineSettings(greeting_seed=11))
        assert [first.answer("hello").text for _ in range(5)] == [second.answer("hello").text for _ in range(5)]

    def test_explicit_rng_wins_over_seed(self, sample_corpus):
        rng = random.Random(5)
        engine = ChatEngine(sample_corpus, settings=EngineSettings(greeting_seed=11), rng=rng)
        assert engine.classifier.rng is rng

    def test_response_delay_uses_sleep_hook(self, sample_corpus):
        sleep = MagicMock()
        engine = ChatEngine(sample_corpus, settings=EngineSettings(response_delay_seconds=0.8), sleep=sleep)
        engine.answer("What is the refund policy?")
        sleep.assert_called_once_with(0.8)

    def test_no_delay_by_default(self, sample_corpus):
        sleep = MagicMock()
        ChatEngine(sample_corpus, sleep=sleep).answer("What is the refund policy?")
        sleep.assert_not_called()

    def test_corpus_unchanged_by_queries(self, engine, sample_corpus, sample_profile):
        before = sample_corpus.documents
        for query in ("give me all the events list", "how do I register", "my attendance"):
            engine.answer(query, sample_profile)
        assert sample_corpus.documents == before


# ---------------------------------------------------------------------------
# answer()
# ---------------------------------------------------------------------------

class TestAnswerFunction:
    def test_matches_engine(self, sample_corpus):
        result = answer("What is the refund policy?", sample_corpus)
        assert result == ChatEngine(sample_corpus).answer("What is the refund policy?")

    def test_refund_policy(self, sample_corpus):
        result = answer("What is the refund policy?", sample_corpus)
        assert result.sources[0] == "Refund Policy"
        assert "💰 **Important**: Earlier cancellations get higher refunds!" in result.text

    def test_profile_passed_through(self, sample_corpus, sample_profile):
        result = answer("what is my attendance", sample_corpus, sample_profile)
        assert "**Attendance Rate**: 85%" in result.text

    def test_seeded_greeting(self, sample_corpus):
        result = answer("thank you", sample_corpus, rng=random.Random(1))
        assert result.text in GREETING_GROUPS[1].responses
