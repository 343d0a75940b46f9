from __future__ import annotations

import json
from pathlib import Path

from .corpus import Corpus, build_corpus
from .schema import (
    AttendedEvent,
    Certificate,
    EventRecord,
    FaqEntry,
    RegisteredEvent,
    RuleSection,
    UserProfile,
)


def _load_jsonl(path: str | Path) -> list[dict]:
    records: list[dict] = []
    with Path(path).open("r", encoding="utf-8") as file_handle:
        for line in file_handle:
            if line.strip():
                records.append(json.loads(line))
    return records


def _with_keywords(record: dict) -> dict:
    return {**record, "keywords": tuple(record.get("keywords", ()))}


def load_rulebook(path: str | Path = "data/rulebook.jsonl") -> list[RuleSection]:
    return [RuleSection(**_with_keywords(record)) for record in _load_jsonl(path)]


def load_faqs(path: str | Path = "data/faqs.jsonl") -> list[FaqEntry]:
    return [FaqEntry(**_with_keywords(record)) for record in _load_jsonl(path)]


def load_events(path: str | Path = "data/events.jsonl") -> list[EventRecord]:
    return [EventRecord(**_with_keywords(record)) for record in _load_jsonl(path)]


def load_corpus(data_dir: str | Path = "data") -> Corpus:
    """Build a corpus from ``rulebook.jsonl``, ``faqs.jsonl`` and ``events.jsonl`` under `data_dir`."""
    root = Path(data_dir)
    return build_corpus(
        load_rulebook(root / "rulebook.jsonl"),
        load_faqs(root / "faqs.jsonl"),
        load_events(root / "events.jsonl"),
    )


def load_profile(path: str | Path) -> UserProfile:
    record = json.loads(Path(path).read_text(encoding="utf-8"))
    return UserProfile(
        name=record.get("name", ""),
        department=record.get("department", ""),
        year=record.get("year"),
        registered_events=tuple(RegisteredEvent(**item) for item in record.get("registered_events", ())),
        attended_events=tuple(AttendedEvent(**item) for item in record.get("attended_events", ())),
        certificates=tuple(Certificate(**item) for item in record.get("certificates", ())),
        attendance_rate=record.get("attendance_rate", 0.0),
        total_events=record.get("total_events"),
    )
