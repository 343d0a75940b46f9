"""Keyword-scored retrieval and templated answers for an event-platform support chat."""

from .corpus import Corpus, build_corpus
from .pipeline import ChatEngine, answer
from .schema import Answer, Document, EventRecord, FaqEntry, RuleSection, UserProfile

__all__ = [
    "Answer",
    "ChatEngine",
    "Corpus",
    "Document",
    "EventRecord",
    "FaqEntry",
    "RuleSection",
    "UserProfile",
    "answer",
    "build_corpus",
]
