from __future__ import annotations

import re

from .patterns import DEFAULT_LIMITS, ExtractionLimits
from .schema import ExtractedContent
from .scoring import query_terms

_NUMBERED = re.compile(r"^\d+\.")
_BULLET = re.compile(r"^[-•]\s*")


def score_line(line: str, keywords: list[str], limits: ExtractionLimits = DEFAULT_LIMITS) -> int:
    """Score one content line: keyword hits plus small bonuses for list structure."""
    stripped = line.strip()
    line_lower = stripped.lower()
    score = sum(limits.keyword_hit for keyword in keywords if keyword in line_lower)
    if _NUMBERED.match(stripped):
        score += limits.numbered_bonus
    if stripped.startswith(("-", "•")):
        score += limits.bullet_bonus
    return score


def extract_relevant_content(content: str, query: str, limits: ExtractionLimits = DEFAULT_LIMITS) -> ExtractedContent:
    """Pick the lines of a document most related to the query and group them.

    Lines that mention a query keyword, or carry numbering or bullet markers,
    are kept. When no line scores, every line is kept. Kept lines are ordered
    by score (stable) and split into numbered steps, bullets with their marker
    removed, and plain sentences, each group capped by `limits`.

    Args:
        content: Document text.
        query: Raw or normalized user query.
        limits: Line weights and group caps.

    Returns:
        Grouped lines plus the kept lines joined as raw fallback text.
    """
    lines = [line for line in (content or "").split("\n") if line.strip()]
    keywords = query_terms(query)

    scored = [(line, score_line(line, keywords, limits)) for line in lines]
    kept = [item for item in scored if item[1] > 0] or scored
    kept = sorted(kept, key=lambda item: item[1], reverse=True)

    steps: list[str] = []
    bullets: list[str] = []
    sentences: list[str] = []
    for line, _ in kept:
        stripped = line.strip()
        if _NUMBERED.match(stripped):
            steps.append(stripped)
        elif stripped.startswith(("-", "•")):
            bullets.append(_BULLET.sub("", stripped, count=1))
        elif len(stripped) >= limits.min_sentence_length:
            sentences.append(stripped)

    return ExtractedContent(
        steps=steps[: limits.max_steps],
        bullets=bullets[: limits.max_bullets],
        sentences=sentences[: limits.max_sentences],
        raw_content="\n".join(line for line, _ in kept),
    )
