"""Fixed vocabularies and weights that drive classification, scoring and formatting.

Everything here is immutable. Components take these tables as parameters with
the module values as defaults, so a deployment can swap in its own wording
without touching branching code.
"""
from __future__ import annotations

from dataclasses import dataclass

EVENT_SECTION_PREFIX = "Event:"


# ---------------------------------------------------------------------------
# Query classification
# ---------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class GreetingGroup:
    name: str
    patterns: tuple[str, ...]
    responses: tuple[str, ...]


GREETING_GROUPS: tuple[GreetingGroup, ...] = (
    GreetingGroup(
        name="greeting",
        patterns=("hi", "hello", "hey", "greetings", "good morning", "good afternoon", "good evening"),
        responses=(
            "Hello! 👋 I'm Planix AI Assistant. I can help you with event information, registration "
            "guidance, certificates, and more. What would you like to know?",
            "Hi there! 👋 How can I assist you today? I can answer questions about events, rules, "
            "certifications, or your participation history.",
            "Hey! 👋 Welcome to Planix. I'm here to help with any questions about events, registration, "
            "attendance, or certificates. What can I help you with?",
        ),
    ),
    GreetingGroup(
        name="thanks",
        patterns=("thanks", "thank you", "appreciate", "grateful"),
        responses=(
            "You're welcome! 😊 Let me know if you need anything else.",
            "Happy to help! 😊 Feel free to ask if you have more questions.",
            "Glad I could assist! 😊 Don't hesitate to reach out if you need more help.",
        ),
    ),
    GreetingGroup(
        name="farewell",
        patterns=("bye", "goodbye", "see you", "exit"),
        responses=(
            "Goodbye! 👋 Have a great day and see you at the next event!",
            "See you later! 👋 Feel free to come back anytime you need help.",
            "Take care! 👋 Good luck with your events!",
        ),
    ),
)

PERSONAL_MARKERS: tuple[str, ...] = (
    "my",
    "i ",
    "i'm",
    "i've",
    "my events",
    "my registrations",
    "my certificates",
    "my attendance",
    "how many",
    "which events",
)

LIST_QUERY_PATTERNS: tuple[str, ...] = (
    "all events",
    "list events",
    "events list",
    "available events",
    "show events",
    "give me events",
    "what events",
    "which events are available",
    "upcoming events",
    "current events",
    "event list",
    "list of events",
    "all the events",
    "show me all",
    "give me all",
    "types of events available",
)


# ---------------------------------------------------------------------------
# Scoring and retrieval
# ---------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class ScoringWeights:
    keyword_hit: int = 5
    content_word_hit: int = 1
    keyword_overlap: int = 2
    section_hit: int = 3
    min_token_length: int = 4


DEFAULT_WEIGHTS = ScoringWeights()


# ---------------------------------------------------------------------------
# Content extraction
# ---------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class ExtractionLimits:
    keyword_hit: int = 5
    numbered_bonus: int = 2
    bullet_bonus: int = 1
    max_steps: int = 10
    max_bullets: int = 8
    max_sentences: int = 5
    min_sentence_length: int = 11


DEFAULT_LIMITS = ExtractionLimits()


# ---------------------------------------------------------------------------
# Event listing
# ---------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class EventCategory:
    """Query-triggered filter over listed events.

    An event matches when `needle` occurs in its `field` value (``"fee"`` or
    ``"type"``), or does not occur when `negate` is set. Events without the
    field never match.
    """

    name: str
    triggers: tuple[str, ...]
    field: str
    needle: str
    heading: str
    negate: bool = False


# First category whose trigger appears in the query wins.
EVENT_CATEGORIES: tuple[EventCategory, ...] = (
    EventCategory(
        name="free",
        triggers=("free", "no cost", "zero fee"),
        field="fee",
        needle="free",
        heading="Here are all the **FREE events** currently available ({count} events):",
    ),
    EventCategory(
        name="paid",
        triggers=("paid", "fee"),
        field="fee",
        needle="free",
        negate=True,
        heading="Here are all the **PAID events** currently available ({count} events):",
    ),
    EventCategory(
        name="workshop",
        triggers=("workshop",),
        field="type",
        needle="workshop",
        heading="Here are all the **WORKSHOPS** currently available ({count} events):",
    ),
    EventCategory(
        name="seminar",
        triggers=("seminar",),
        field="type",
        needle="seminar",
        heading="Here are all the **SEMINARS** currently available ({count} events):",
    ),
    EventCategory(
        name="hackathon",
        triggers=("hackathon",),
        field="type",
        needle="hackathon",
        heading="Here are all the **HACKATHONS** currently available ({count} events):",
    ),
)

ALL_EVENTS_HEADING = "Here are all **{count} events** currently available for registration:"

EMPTY_FILTER_MESSAGE = (
    "I found {total} events in total, but none match your specific criteria. "
    'Try asking about "all available events" to see the complete list!'
)

INTERROGATIVE_PREFIXES: tuple[str, ...] = ("how", "what", "where", "when", "can i", "do i")


# ---------------------------------------------------------------------------
# Answer wording
# ---------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class TopicTip:
    trigger: str
    line: str


# Checked in order against the lowercased section of the answering document.
TOPIC_TIPS: tuple[TopicTip, ...] = (
    TopicTip("certificate", "🎓 **Remember**: Meet all eligibility criteria to earn your certificate!"),
    TopicTip("registration", "✅ **Quick Tip**: Register early to secure your spot!"),
    TopicTip("attendance", "📱 **Pro Tip**: Keep your QR code ready before entering the venue!"),
    TopicTip("cancel", "⚠️ **Note**: Cancel as early as possible to avoid penalties!"),
    TopicTip("refund", "💰 **Important**: Earlier cancellations get higher refunds!"),
)

TOPIC_MENU_FALLBACK = """I don't have specific information about that in my knowledge base. However, I can help you with:

• Event registration and details
• Attendance and QR code scanning
• Certificate queries
• Rules and policies
• Your personal participation history

Could you rephrase your question or ask about one of these topics?"""

REPHRASE_FALLBACK = "I'm not sure how to answer that. Could you please rephrase your question?"

CLOSING_PROMPT = "💬 Ask me anything else about events, registration, certificates, or attendance!"


@dataclass(slots=True, frozen=True)
class SuggestionSet:
    trigger: str
    questions: tuple[str, ...]


FOLLOW_UP_SUGGESTIONS: tuple[SuggestionSet, ...] = (
    SuggestionSet(
        "register",
        (
            "How do I cancel my registration?",
            "What types of events are available?",
            "How is attendance marked?",
        ),
    ),
    SuggestionSet(
        "certificate",
        (
            "How many certificates do I have?",
            "What are the requirements for certificates?",
            "When will I receive my certificate?",
        ),
    ),
    SuggestionSet(
        "attendance",
        (
            "How do I scan QR codes?",
            "What's my attendance rate?",
            "Do I need 100% attendance for certificates?",
        ),
    ),
)

DEFAULT_SUGGESTIONS: tuple[str, ...] = (
    "How do I register for events?",
    "How can I get certificates?",
    "What types of events are available?",
)
