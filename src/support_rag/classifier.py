from __future__ import annotations

import random

from .patterns import GREETING_GROUPS, LIST_QUERY_PATTERNS, PERSONAL_MARKERS, GreetingGroup
from .schema import Classification
from .scoring import normalize_text


def match_greeting_group(
    query: str, groups: tuple[GreetingGroup, ...] = GREETING_GROUPS
) -> GreetingGroup | None:
    """Return the first greeting group with a pattern present in the query.

    Patterns are matched on whole words of the normalized query, so "hi" hits
    "hi there" but not "which".
    """
    padded = f" {normalize_text(query)} "
    for group in groups:
        for pattern in group.patterns:
            if f" {pattern} " in padded:
                return group
    return None


def is_personal_query(query: str, markers: tuple[str, ...] = PERSONAL_MARKERS) -> bool:
    query_lower = query.lower()
    return any(marker in query_lower for marker in markers)


def is_list_query(query: str, patterns: tuple[str, ...] = LIST_QUERY_PATTERNS) -> bool:
    query_lower = query.lower()
    return any(pattern in query_lower for pattern in patterns)


class QueryClassifier:
    """Assigns greeting, personal and list flags to raw query text.

    Greeting replies are drawn from `rng`; pass a seeded ``random.Random`` for
    reproducible output.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        greeting_groups: tuple[GreetingGroup, ...] = GREETING_GROUPS,
        personal_markers: tuple[str, ...] = PERSONAL_MARKERS,
        list_patterns: tuple[str, ...] = LIST_QUERY_PATTERNS,
    ):
        self.rng = rng or random.Random()
        self.greeting_groups = greeting_groups
        self.personal_markers = personal_markers
        self.list_patterns = list_patterns

    def classify(self, query: str) -> Classification:
        group = match_greeting_group(query, self.greeting_groups)
        if group is not None:
            return Classification(is_greeting=True, greeting_response=self.rng.choice(group.responses))

        return Classification(
            is_personal_query=is_personal_query(query, self.personal_markers),
            is_list_query=is_list_query(query, self.list_patterns),
        )
