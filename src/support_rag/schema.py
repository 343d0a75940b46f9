from __future__ import annotations

from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Corpus source entries
# ---------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class RuleSection:
    """Rulebook section authored as free text."""

    rule_id: str
    section: str
    content: str
    keywords: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class FaqEntry:
    """Question/answer pair grouped under a support category."""

    faq_id: str
    category: str
    question: str
    answer: str
    keywords: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class EventRecord:
    """Structured event listing; optional fields are left empty when unknown."""

    event_id: str
    name: str
    type: str
    date: str
    fee: str
    fee_amount: int = 0
    time: str = ""
    venue: str = ""
    description: str = ""
    duration: str = ""
    instructor: str = ""
    prerequisites: str = ""
    requirements: str = ""
    seats: int | None = None
    available_seats: int | None = None
    registration_status: str = ""
    includes: str = ""
    prizes: str = ""
    keywords: tuple[str, ...] = ()

    @property
    def fee_label(self) -> str:
        if self.fee_amount > 0:
            return f"{self.fee} (Rs. {self.fee_amount})"
        return self.fee

    @property
    def seats_label(self) -> str:
        if self.available_seats is None:
            return ""
        if self.seats is None:
            return str(self.available_seats)
        return f"{self.available_seats} / {self.seats}"

    @property
    def is_free(self) -> bool:
        return "free" in self.fee.lower()


# ---------------------------------------------------------------------------
# Retrieval units
# ---------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class Document:
    """Searchable knowledge unit rendered from a rule, FAQ, or event entry.

    `kind` is one of ``"rule"``, ``"faq"`` or ``"event"``. Event documents keep
    their source record in `event` so formatters can read structured fields
    instead of re-parsing `content`.
    """

    doc_id: str
    section: str
    content: str
    keywords: tuple[str, ...] = ()
    kind: str = "rule"
    event: EventRecord | None = None


@dataclass(slots=True, frozen=True)
class ScoredDocument:
    """Document paired with its non-negative relevance score for one query."""

    document: Document
    score: int


@dataclass(slots=True, frozen=True)
class Classification:
    """Intent flags for one query; greeting carries the pre-selected reply."""

    is_greeting: bool = False
    is_personal_query: bool = False
    is_list_query: bool = False
    greeting_response: str = ""


@dataclass(slots=True, frozen=True)
class SourceRef:
    section: str
    doc_id: str


@dataclass(slots=True)
class RetrievalContext:
    """Per-call aggregate handed from the context builder to the synthesizer."""

    is_greeting: bool
    is_personal_query: bool
    is_list_query: bool
    has_relevant_docs: bool
    relevant_docs: list[ScoredDocument] = field(default_factory=list)
    general_context_text: str = ""
    personal_context_text: str = ""
    top_sources: list[SourceRef] = field(default_factory=list)
    greeting_response: str = ""


@dataclass(slots=True)
class ExtractedContent:
    """Lines pulled out of one document, grouped for structured presentation."""

    steps: list[str] = field(default_factory=list)
    bullets: list[str] = field(default_factory=list)
    sentences: list[str] = field(default_factory=list)
    raw_content: str = ""

    @property
    def has_steps(self) -> bool:
        return bool(self.steps)

    @property
    def has_bullets(self) -> bool:
        return bool(self.bullets)


@dataclass(slots=True)
class Answer:
    """Final reply surfaced to the chat UI."""

    text: str
    sources: list[str] = field(default_factory=list)
    is_from_knowledge_base: bool = False


# ---------------------------------------------------------------------------
# External profile (read-only input)
# ---------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class RegisteredEvent:
    name: str
    status: str = "upcoming"


@dataclass(slots=True, frozen=True)
class AttendedEvent:
    name: str
    date: str = ""


@dataclass(slots=True, frozen=True)
class Certificate:
    event_name: str
    issued_date: str = ""


@dataclass(slots=True, frozen=True)
class UserProfile:
    """Participant profile supplied by the session collaborator."""

    name: str = ""
    department: str = ""
    year: int | None = None
    registered_events: tuple[RegisteredEvent, ...] = ()
    attended_events: tuple[AttendedEvent, ...] = ()
    certificates: tuple[Certificate, ...] = ()
    attendance_rate: float = 0.0
    total_events: int | None = None

    @property
    def events_participated(self) -> int:
        if self.total_events is not None:
            return self.total_events
        return len(self.registered_events) + len(self.attended_events)

    @property
    def attendance_percent(self) -> int:
        # Half-up rounding to a whole percentage.
        return int(self.attendance_rate * 100 + 0.5)
