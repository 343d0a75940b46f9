"""Answer synthesis from a retrieval context.

Strategies are tried in a fixed priority order and the first applicable one
produces the answer:

1. greeting: the classifier's pre-selected reply, verbatim
2. no match: nothing retrieved and no profile to answer from, topic menu
3. personal: profile-derived templates (never corpus-derived)
4. knowledge: event list for list queries over several events, otherwise an
   extractive answer built from the best document
5. rephrase fallback
"""
from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from .event_listing import format_event_list
from .extraction import extract_relevant_content
from .patterns import (
    CLOSING_PROMPT,
    DEFAULT_SUGGESTIONS,
    EVENT_SECTION_PREFIX,
    FOLLOW_UP_SUGGESTIONS,
    INTERROGATIVE_PREFIXES,
    REPHRASE_FALLBACK,
    TOPIC_MENU_FALLBACK,
    TOPIC_TIPS,
    TopicTip,
)
from .personal import generate_personal_answer
from .schema import Answer, ExtractedContent, RetrievalContext, UserProfile

logger = logging.getLogger(__name__)

_INTERROGATIVE = re.compile(
    r"^(" + "|".join(re.escape(prefix) for prefix in INTERROGATIVE_PREFIXES) + r")", re.IGNORECASE
)


def is_interrogative(query: str) -> bool:
    return bool(_INTERROGATIVE.match(query.strip()))


def topic_tip(section: str, tips: tuple[TopicTip, ...] = TOPIC_TIPS) -> str:
    section_lower = section.lower()
    for tip in tips:
        if tip.trigger in section_lower:
            return tip.line
    return ""


def compose_extractive_answer(query: str, section: str, extracted: ExtractedContent) -> str:
    """Lay out extracted lines as steps, then bullets, then sentences."""
    if is_interrogative(query):
        parts = [f"Here's what you need to know about **{section}**:\n"]
    else:
        parts = [f"Based on our **{section}** guidelines:\n"]

    if extracted.has_steps:
        parts.append("\n".join(extracted.steps) + "\n")
    if extracted.has_bullets:
        parts.append("\n".join(f"• {bullet}" for bullet in extracted.bullets) + "\n")
    if extracted.sentences:
        parts.append("\n".join(extracted.sentences))
    if not extracted.has_steps and not extracted.has_bullets and not extracted.sentences:
        parts.append(extracted.raw_content)

    tip = topic_tip(section)
    if tip:
        parts.append("\n" + tip)

    return "\n".join(parts).strip()


def generate_knowledge_answer(query: str, context: RetrievalContext) -> str:
    relevant = context.relevant_docs
    event_docs = [row for row in relevant if row.document.section.startswith(EVENT_SECTION_PREFIX)]

    if context.is_list_query and len(event_docs) > 1:
        logger.debug("Formatting %d events as list", len(event_docs))
        return format_event_list(event_docs, query)

    top = relevant[0].document
    logger.debug("Answering from %s (score %d)", top.section, relevant[0].score)
    extracted = extract_relevant_content(top.content, query)
    text = compose_extractive_answer(query, top.section, extracted)

    related = list(dict.fromkeys(row.document.section for row in relevant[1:3] if row.document.section != top.section))
    if related:
        text += f"\n\n**📚 Related Topics**: {', '.join(related)}"

    return f"{text}\n\n{CLOSING_PROMPT}"


# ---------------------------------------------------------------------------
# Strategy table
# ---------------------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class Strategy:
    name: str
    applies: Callable[[RetrievalContext, UserProfile | None], bool]
    respond: Callable[[str, RetrievalContext, UserProfile | None], Answer]


def _has_profile_context(context: RetrievalContext, profile: UserProfile | None) -> bool:
    return context.is_personal_query and profile is not None and bool(context.personal_context_text)


def _source_sections(context: RetrievalContext) -> list[str]:
    return [source.section for source in context.top_sources]


def _greeting(query: str, context: RetrievalContext, profile: UserProfile | None) -> Answer:
    return Answer(text=context.greeting_response)


def _no_match(query: str, context: RetrievalContext, profile: UserProfile | None) -> Answer:
    return Answer(text=TOPIC_MENU_FALLBACK)


def _personal(query: str, context: RetrievalContext, profile: UserProfile | None) -> Answer:
    return Answer(text=generate_personal_answer(query, profile, context.personal_context_text))


def _knowledge(query: str, context: RetrievalContext, profile: UserProfile | None) -> Answer:
    return Answer(
        text=generate_knowledge_answer(query, context),
        sources=_source_sections(context),
        is_from_knowledge_base=True,
    )


def _rephrase(query: str, context: RetrievalContext, profile: UserProfile | None) -> Answer:
    return Answer(text=REPHRASE_FALLBACK)


STRATEGIES: tuple[Strategy, ...] = (
    Strategy("greeting", lambda ctx, profile: ctx.is_greeting, _greeting),
    Strategy(
        "no-match",
        lambda ctx, profile: not ctx.has_relevant_docs and not _has_profile_context(ctx, profile),
        _no_match,
    ),
    Strategy("personal", _has_profile_context, _personal),
    Strategy("knowledge", lambda ctx, profile: ctx.has_relevant_docs, _knowledge),
    Strategy("rephrase", lambda ctx, profile: True, _rephrase),
)


def synthesize_answer(query: str, context: RetrievalContext, profile: UserProfile | None = None) -> Answer:
    """Produce the final answer for one query from its retrieval context.

    Args:
        query: Raw user query.
        context: Output of the context builder for this query.
        profile: Profile used by the personal strategy; ignored otherwise.

    Returns:
        Answer with text, cited section labels, and whether the text came from
        retrieved documents.
    """
    for strategy in STRATEGIES:
        if strategy.applies(context, profile):
            logger.info("Synthesis strategy: %s", strategy.name)
            return strategy.respond(query, context, profile)
    return Answer(text=REPHRASE_FALLBACK)


def suggested_questions(query: str) -> list[str]:
    """Three follow-up questions related to the query's topic."""
    query_lower = query.lower()
    for suggestion in FOLLOW_UP_SUGGESTIONS:
        if suggestion.trigger in query_lower:
            return list(suggestion.questions)
    return list(DEFAULT_SUGGESTIONS)
