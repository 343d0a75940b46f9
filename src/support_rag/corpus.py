from __future__ import annotations

from collections.abc import Iterable, Iterator

from .patterns import EVENT_SECTION_PREFIX
from .schema import Document, EventRecord, FaqEntry, RuleSection


def _keywords(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(value.lower() for value in values if value)


def rule_to_document(rule: RuleSection) -> Document:
    return Document(
        doc_id=rule.rule_id,
        section=rule.section,
        content=rule.content,
        keywords=_keywords(rule.keywords),
        kind="rule",
    )


def faq_to_document(faq: FaqEntry) -> Document:
    return Document(
        doc_id=faq.faq_id,
        section=f"FAQ - {faq.category}",
        content=f"Q: {faq.question}\n\nA: {faq.answer}",
        keywords=_keywords(faq.keywords),
        kind="faq",
    )


def render_event_content(event: EventRecord) -> str:
    """Render an event as ``Key: Value`` lines in the layout the list formatter parses."""
    lines = [
        event.name,
        f"Type: {event.type}",
        f"Date: {event.date}",
        f"Time: {event.time}",
        f"Venue: {event.venue}",
        f"Fee: {event.fee_label}",
    ]
    if event.seats_label:
        lines.append(f"Available Seats: {event.seats_label}")
    if event.registration_status:
        lines.append(f"Registration Status: {event.registration_status}")
    lines.extend(
        [
            "",
            f"Description: {event.description}",
            "",
            f"Duration: {event.duration}",
            f"Instructor: {event.instructor}",
            f"Prerequisites: {event.prerequisites}",
            f"Requirements: {event.requirements}",
        ]
    )
    if event.includes:
        lines.append(f"Includes: {event.includes}")
    if event.prizes:
        lines.append(f"Prizes: {event.prizes}")
    return "\n".join(lines)


def event_to_document(event: EventRecord) -> Document:
    return Document(
        doc_id=event.event_id,
        section=f"{EVENT_SECTION_PREFIX} {event.name}",
        content=render_event_content(event),
        keywords=_keywords([*event.keywords, event.name, "event", "available"]),
        kind="event",
        event=event,
    )


class Corpus:
    """Read-only, ordered collection of documents shared by every query.

    Order is rulebook sections, then FAQs, then events; ranking ties fall back
    to this order.
    """

    __slots__ = ("_documents",)

    def __init__(self, documents: Iterable[Document]):
        object.__setattr__(self, "_documents", tuple(documents))

    def __setattr__(self, name, value):
        raise AttributeError("Corpus is read-only")

    @property
    def documents(self) -> tuple[Document, ...]:
        return self._documents

    def event_documents(self) -> list[Document]:
        return [doc for doc in self._documents if doc.section.startswith(EVENT_SECTION_PREFIX)]

    def get(self, doc_id: str) -> Document | None:
        for document in self._documents:
            if document.doc_id == doc_id:
                return document
        return None

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Corpus):
            return NotImplemented
        return self._documents == other._documents

    def __hash__(self) -> int:
        return hash(self._documents)

    def __repr__(self) -> str:
        return f"Corpus({len(self._documents)} documents)"


def build_corpus(
    rulebook: Iterable[RuleSection],
    faqs: Iterable[FaqEntry],
    events: Iterable[EventRecord],
) -> Corpus:
    """Concatenate rulebook, FAQ and event entries into one searchable corpus.

    Args:
        rulebook: Rulebook sections, kept verbatim.
        faqs: FAQ entries, rendered as ``Q:``/``A:`` text under ``FAQ - <category>``.
        events: Event records, rendered as key-value text under ``Event: <name>``.

    Returns:
        Immutable corpus in source order.

    Raises:
        ValueError: If two entries share a document id.
    """
    documents = [
        *(rule_to_document(rule) for rule in rulebook),
        *(faq_to_document(faq) for faq in faqs),
        *(event_to_document(event) for event in events),
    ]

    seen: set[str] = set()
    for document in documents:
        if document.doc_id in seen:
            raise ValueError(f"Duplicate document id in corpus: {document.doc_id}")
        seen.add(document.doc_id)

    return Corpus(documents)
