"""Tests for core.config."""
from pathlib import Path

import pytest

from core.config import DEFAULT_ROOT, Settings, load_settings

ENV_VARS = [
    "STUDY_PLANNER_ROOT",
    "STUDY_PLANNER_KNOWLEDGE_FILE",
    "STUDY_PLANNER_PLAN_FILE",
    "STUDY_PLANNER_TOPIC_MARKER",
    "STUDY_PLANNER_PREVIEW_CHARS",
    "STUDY_PLANNER_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    assert load_settings() == Settings()
    assert load_settings().root == DEFAULT_ROOT


def test_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("STUDY_PLANNER_ROOT", str(tmp_path))
    monkeypatch.setenv("STUDY_PLANNER_KNOWLEDGE_FILE", "kb.md")
    monkeypatch.setenv("STUDY_PLANNER_PLAN_FILE", "out/plan.md")
    monkeypatch.setenv("STUDY_PLANNER_TOPIC_MARKER", "TOPIC")
    monkeypatch.setenv("STUDY_PLANNER_PREVIEW_CHARS", "120")
    monkeypatch.setenv("STUDY_PLANNER_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings == Settings(
        root=tmp_path,
        knowledge_file="kb.md",
        plan_file="out/plan.md",
        topic_marker="TOPIC",
        preview_chars=120,
        log_level="DEBUG",
    )


def test_bad_preview_chars(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STUDY_PLANNER_PREVIEW_CHARS", "lots")

    with pytest.raises(ValueError, match="STUDY_PLANNER_PREVIEW_CHARS"):
        load_settings()


def test_negative_preview_chars(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STUDY_PLANNER_PREVIEW_CHARS", "-1")

    with pytest.raises(ValueError):
        load_settings()


def test_bad_marker(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STUDY_PLANNER_TOPIC_MARKER", "KA(")

    with pytest.raises(ValueError, match="regex"):
        load_settings()
