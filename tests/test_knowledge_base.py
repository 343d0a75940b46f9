"""Tests for knowledge_base.py: bundled dataset and its serialization."""
from __future__ import annotations

import json

from support_rag.knowledge_base import (
    EVENTS,
    FAQS,
    RULEBOOK,
    SAMPLE_PROFILE,
    build_and_save_dataset,
    build_sample_corpus,
    save_dataset,
)


class TestBundledData:
    def test_counts(self):
        assert len(RULEBOOK) == 10
        assert len(FAQS) == 14
        assert len(EVENTS) == 12

    def test_ids_unique(self):
        ids = [rule.rule_id for rule in RULEBOOK] + [faq.faq_id for faq in FAQS] + [event.event_id for event in EVENTS]
        assert len(ids) == len(set(ids))

    def test_free_and_paid_split(self):
        assert sum(1 for event in EVENTS if event.is_free) == 5
        assert all(event.fee_amount > 0 for event in EVENTS if not event.is_free)

    def test_sample_profile(self):
        assert SAMPLE_PROFILE.name == "Rahul Sharma"
        assert len(SAMPLE_PROFILE.certificates) == 2
        assert SAMPLE_PROFILE.attendance_percent == 85


class TestBuildSampleCorpus:
    def test_size_and_order(self):
        corpus = build_sample_corpus()
        assert len(corpus) == 36
        kinds = [doc.kind for doc in corpus]
        assert kinds == ["rule"] * 10 + ["faq"] * 14 + ["event"] * 12

    def test_event_documents(self):
        assert len(build_sample_corpus().event_documents()) == 12


class TestSaveDataset:
    def test_writes_jsonl_files(self, tmp_path):
        save_dataset(output_dir=str(tmp_path))
        lines = (tmp_path / "events.jsonl").read_text(encoding="utf-8").splitlines()
        assert len(lines) == 12
        assert json.loads(lines[0])["event_id"] == "evt_001"

    def test_creates_nested_directory(self, tmp_path):
        target = tmp_path / "a" / "b"
        save_dataset(rulebook=RULEBOOK[:1], faqs=(), events=(), output_dir=str(target))
        assert len((target / "rulebook.jsonl").read_text(encoding="utf-8").splitlines()) == 1
        assert (target / "faqs.jsonl").read_text(encoding="utf-8") == ""

    def test_build_and_save_writes_profile(self, tmp_path):
        build_and_save_dataset(output_dir=str(tmp_path))
        profile = json.loads((tmp_path / "profile.json").read_text(encoding="utf-8"))
        assert profile["name"] == "Rahul Sharma"
        assert profile["certificates"][0]["event_name"] == "Python Workshop"
