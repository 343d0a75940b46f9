from support_rag.knowledge_base import build_and_save_dataset
from support_rag.settings import load_settings


def main() -> None:
    """Write the bundled rulebook, FAQs, events and sample profile to the data directory."""
    _, paths = load_settings()
    build_and_save_dataset(output_dir=paths.data_dir)
    print(f"Generated rulebook.jsonl, faqs.jsonl, events.jsonl and profile.json in {paths.data_dir}/")


if __name__ == "__main__":
    main()
