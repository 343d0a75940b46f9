from __future__ import annotations

from dataclasses import dataclass

from .patterns import (
    ALL_EVENTS_HEADING,
    EMPTY_FILTER_MESSAGE,
    EVENT_CATEGORIES,
    EVENT_SECTION_PREFIX,
    EventCategory,
)
from .schema import Document, ScoredDocument

# Content prefix -> summary field, for event documents without a structured record.
FIELD_PREFIXES: tuple[tuple[str, str], ...] = (
    ("Type:", "type"),
    ("Date:", "date"),
    ("Fee:", "fee"),
    ("Available Seats:", "seats"),
    ("Registration Status:", "status"),
)


@dataclass(slots=True)
class EventSummary:
    """Fields shown for one event in a list answer; empty strings are omitted."""

    name: str
    type: str = ""
    date: str = ""
    fee: str = ""
    seats: str = ""
    status: str = ""
    score: int = 0

    @property
    def is_free(self) -> bool:
        return "free" in self.fee.lower()


def parse_event_fields(content: str) -> dict[str, str]:
    """Read ``Key: Value`` lines from rendered event text, ignoring anything else."""
    fields: dict[str, str] = {}
    for raw_line in (content or "").split("\n"):
        line = raw_line.strip()
        for prefix, name in FIELD_PREFIXES:
            if line.startswith(prefix):
                fields[name] = line[len(prefix) :].strip()
    return fields


def event_display_name(document: Document) -> str:
    section = document.section
    if section.startswith(EVENT_SECTION_PREFIX):
        section = section[len(EVENT_SECTION_PREFIX) :]
    return section.strip()


def summarize_event(row: ScoredDocument) -> EventSummary:
    document = row.document
    name = event_display_name(document)
    record = document.event
    if record is not None:
        return EventSummary(
            name=name,
            type=record.type,
            date=record.date,
            fee=record.fee_label,
            seats=record.seats_label,
            status=record.registration_status,
            score=row.score,
        )
    return EventSummary(name=name, score=row.score, **parse_event_fields(document.content))


def match_category(query: str, categories: tuple[EventCategory, ...] = EVENT_CATEGORIES) -> EventCategory | None:
    query_lower = query.lower()
    for category in categories:
        if any(trigger in query_lower for trigger in category.triggers):
            return category
    return None


def in_category(event: EventSummary, category: EventCategory) -> bool:
    value = getattr(event, category.field, "")
    if not value:
        return False
    found = category.needle in value.lower()
    return not found if category.negate else found


def _format_event(index: int, event: EventSummary) -> str:
    lines = [f"**{index}. {event.name}**"]
    if event.type:
        lines.append(f"   📌 Type: {event.type}")
    if event.date:
        lines.append(f"   📅 Date: {event.date}")
    if event.fee:
        lines.append(f"   💰 Fee: {event.fee}")
    if event.seats:
        lines.append(f"   🪑 Seats: {event.seats}")
    if event.status:
        lines.append(f"   ✅ Status: {event.status}")
    return "\n".join(lines) + "\n"


def format_event_list(event_docs: list[ScoredDocument], query: str) -> str:
    """Render event documents as a numbered list, filtered by the query's category.

    Args:
        event_docs: Ranked event documents.
        query: Raw user query; selects at most one category filter.

    Returns:
        List answer text, or a broaden-your-query message when the filter
        removes every event.
    """
    events = [summarize_event(row) for row in event_docs]
    category = match_category(query)
    shown = [event for event in events if in_category(event, category)] if category else events

    if not shown:
        return EMPTY_FILTER_MESSAGE.format(total=len(events))

    heading = category.heading if category else ALL_EVENTS_HEADING
    parts = [heading.format(count=len(shown)), ""]
    for index, event in enumerate(shown, start=1):
        parts.append(_format_event(index, event))
    parts.append("---\n")

    types = list(dict.fromkeys(event.type for event in shown if event.type))
    if len(types) > 1:
        parts.append(f"**Event Types Available**: {', '.join(types)}\n")

    free_count = sum(1 for event in shown if event.is_free)
    paid_count = len(shown) - free_count
    if free_count > 0 and paid_count > 0:
        parts.append(f"**Fee Structure**: {free_count} Free, {paid_count} Paid\n")

    parts.append('💡 **Want details about a specific event?** Just ask: "Tell me about [event name]"')
    parts.append("📝 **Ready to register?** Visit the Events page to sign up!")
    return "\n".join(parts)
