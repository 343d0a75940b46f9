import argparse
import logging
from pathlib import Path

from support_rag.io_utils import load_corpus, load_profile
from support_rag.knowledge_base import SAMPLE_PROFILE, build_sample_corpus
from support_rag.pipeline import ChatEngine
from support_rag.settings import load_settings
from support_rag.synthesis import suggested_questions


def main() -> None:
    parser = argparse.ArgumentParser(description="Answer one support question.")
    parser.add_argument("query", help="Question to ask")
    parser.add_argument("--profile", help="Path to a profile JSON file")
    parser.add_argument("--sample-profile", action="store_true", help="Answer as the bundled sample participant")
    args = parser.parse_args()

    settings, paths = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    data_dir = Path(paths.data_dir)
    corpus = load_corpus(data_dir) if (data_dir / "rulebook.jsonl").exists() else build_sample_corpus()

    profile = None
    if args.profile:
        profile = load_profile(args.profile)
    elif args.sample_profile:
        profile = SAMPLE_PROFILE

    engine = ChatEngine(corpus, settings=settings)
    result = engine.answer(args.query, profile)

    print(result.text)
    if result.sources:
        print(f"\nSources: {', '.join(result.sources)}")
    print("\nYou might also ask:")
    for question in suggested_questions(args.query):
        print(f"  - {question}")


if __name__ == "__main__":
    main()
