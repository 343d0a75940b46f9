from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable

from .classifier import QueryClassifier
from .context import build_context
from .corpus import Corpus
from .patterns import TOPIC_MENU_FALLBACK
from .retrieval import retrieve
from .schema import Answer, Classification, RetrievalContext, ScoredDocument, UserProfile
from .settings import EngineSettings
from .synthesis import synthesize_answer

logger = logging.getLogger(__name__)


class ChatEngine:
    """Answers support queries against one shared, read-only corpus.

    Each call runs classify, retrieve, build context and synthesize in a single
    synchronous pass. The engine holds no per-query state, so one instance can
    serve any number of callers.
    """

    def __init__(
        self,
        corpus: Corpus,
        settings: EngineSettings | None = None,
        rng: random.Random | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.corpus = corpus
        self.settings = settings or EngineSettings()
        if rng is None and self.settings.greeting_seed is not None:
            rng = random.Random(self.settings.greeting_seed)
        self.classifier = QueryClassifier(rng=rng)
        self._sleep = sleep

    def classify(self, query: str) -> Classification:
        return self.classifier.classify(query)

    def retrieve(self, query: str, classification: Classification) -> list[ScoredDocument]:
        if classification.is_greeting:
            return []
        return retrieve(
            query,
            self.corpus,
            top_k=self.settings.top_k,
            list_mode=classification.is_list_query,
            list_top_k=self.settings.list_top_k,
        )

    def retrieve_context(self, query: str, profile: UserProfile | None = None) -> RetrievalContext:
        """Classify the query and gather everything the synthesizer needs."""
        classification = self.classify(query)
        ranked = self.retrieve(query, classification)
        return build_context(classification, ranked, query, profile)

    def synthesize(self, query: str, context: RetrievalContext, profile: UserProfile | None = None) -> Answer:
        return synthesize_answer(query, context, profile)

    def answer(self, query: str, profile: UserProfile | None = None) -> Answer:
        """Answer one support query.

        Args:
            query: Raw user text.
            profile: Profile of the signed-in participant, or None when unknown.

        Returns:
            Answer with reply text, cited section labels, and whether the text
            was drawn from the corpus.
        """
        if not query or not query.strip():
            logger.info("Empty query; returning topic menu")
            return Answer(text=TOPIC_MENU_FALLBACK)

        context = self.retrieve_context(query, profile)
        logger.debug(
            "Query flags: greeting=%s personal=%s list=%s docs=%d",
            context.is_greeting,
            context.is_personal_query,
            context.is_list_query,
            len(context.relevant_docs),
        )
        result = self.synthesize(query, context, profile)
        self.pause()
        return result

    def pause(self) -> None:
        """Sleep for the configured response delay; no-op when it is zero."""
        if self.settings.response_delay_seconds > 0:
            self._sleep(self.settings.response_delay_seconds)


def answer(
    query: str,
    corpus: Corpus,
    profile: UserProfile | None = None,
    rng: random.Random | None = None,
) -> Answer:
    """One-shot convenience wrapper around :class:`ChatEngine` with default settings."""
    return ChatEngine(corpus, rng=rng).answer(query, profile)
