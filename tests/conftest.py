"""Shared pytest fixtures for support_rag unit tests."""
from __future__ import annotations

import random

import pytest

from support_rag.corpus import Corpus, build_corpus
from support_rag.knowledge_base import SAMPLE_PROFILE, build_sample_corpus
from support_rag.pipeline import ChatEngine
from support_rag.schema import (
    AttendedEvent,
    Certificate,
    Document,
    EventRecord,
    FaqEntry,
    RegisteredEvent,
    RuleSection,
    UserProfile,
)


@pytest.fixture()
def sample_corpus() -> Corpus:
    return build_sample_corpus()


@pytest.fixture()
def sample_profile() -> UserProfile:
    return SAMPLE_PROFILE


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(42)


@pytest.fixture()
def engine(sample_corpus, rng) -> ChatEngine:
    return ChatEngine(sample_corpus, rng=rng)


@pytest.fixture()
def registration_rule() -> RuleSection:
    return RuleSection(
        rule_id="rule_reg",
        section="Registration",
        content=(
            "To register for an event:\n"
            "1. Open the Events page\n"
            "2. Click the Register button\n"
            "You will receive a confirmation email once registered."
        ),
        keywords=("register", "sign up"),
    )


@pytest.fixture()
def refund_faq() -> FaqEntry:
    return FaqEntry(
        faq_id="faq_refund",
        category="Payment",
        question="How do refunds work?",
        answer="Refunds are processed within 10-15 business days.",
        keywords=("refund", "money back"),
    )


@pytest.fixture()
def free_event() -> EventRecord:
    return EventRecord(
        event_id="evt_free",
        name="Intro to Git",
        type="Workshop",
        date="2026-03-01",
        fee="Free",
        time="10:00 AM - 12:00 PM",
        venue="Lab 1",
        seats=40,
        available_seats=12,
        registration_status="Open",
        keywords=("git", "workshop", "free"),
    )


@pytest.fixture()
def paid_event() -> EventRecord:
    return EventRecord(
        event_id="evt_paid",
        name="Robotics Hackathon",
        type="Hackathon",
        date="2026-04-02",
        fee="Rs. 500 per team",
        fee_amount=500,
        seats=60,
        available_seats=20,
        registration_status="Open",
        prizes="First Prize: Rs. 10,000",
        keywords=("robotics", "hackathon", "paid"),
    )


@pytest.fixture()
def small_corpus(registration_rule, refund_faq, free_event, paid_event) -> Corpus:
    return build_corpus([registration_rule], [refund_faq], [free_event, paid_event])


@pytest.fixture()
def plain_document() -> Document:
    return Document(
        doc_id="doc_plain",
        section="Attendance",
        content="Attendance is marked by scanning the QR code at the venue.",
        keywords=("attendance", "qr code"),
    )


@pytest.fixture()
def two_certificate_profile() -> UserProfile:
    return UserProfile(
        name="Asha Verma",
        department="Electronics",
        year=2,
        registered_events=(RegisteredEvent(name="Cloud Computing Webinar"),),
        attended_events=(AttendedEvent(name="Robotics Meetup", date="2026-01-12"),),
        certificates=(
            Certificate(event_name="Robotics Meetup", issued_date="2026-01-20"),
            Certificate(event_name="Design Sprint", issued_date="2025-12-05"),
        ),
        attendance_rate=0.9,
    )
