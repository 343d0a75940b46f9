import logging

from support_rag.knowledge_base import SAMPLE_PROFILE, build_sample_corpus
from support_rag.pipeline import ChatEngine
from support_rag.settings import load_settings

GENERAL_QUERIES = [
    "How do I register for an event?",
    "What are the certificate requirements?",
    "How is attendance marked?",
    "Can I cancel my registration?",
    "What is the refund policy?",
    "give me all the events list",
    "show me free events",
    "list paid workshops",
    "What is the code of conduct?",
    "asdkjaskd random gibberish",
]

PERSONAL_QUERIES = [
    "how many certificates do I have",
    "where can I download my certificates",
    "which events am I registered for",
    "what is my attendance",
    "tell me about my profile",
]


def main() -> None:
    """Run the bundled queries and print what each one retrieved."""
    settings, _ = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    engine = ChatEngine(build_sample_corpus(), settings=settings)

    for query in GENERAL_QUERIES:
        context = engine.retrieve_context(query)
        result = engine.answer(query)
        top = [(row.document.section, row.score) for row in context.relevant_docs[:3]]
        print(f"{query!r}")
        print(f"  retrieved={len(context.relevant_docs)} top={top}")
        print(f"  from_knowledge_base={result.is_from_knowledge_base} sources={result.sources}")

    for query in PERSONAL_QUERIES:
        result = engine.answer(query, SAMPLE_PROFILE)
        first_line = result.text.splitlines()[0] if result.text else ""
        print(f"{query!r}")
        print(f"  personal reply: {first_line}")


if __name__ == "__main__":
    main()
