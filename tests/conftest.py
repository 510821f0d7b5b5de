"""Shared fixtures for the study planner tests."""
from pathlib import Path

import pytest

from core.config import Settings
from core.plan_store import InMemoryRepository, PlanStore

KNOWLEDGE_BASE = """# Concepts

Some introductory prose that is not a topic.

KA 1 - Testing: unit tests
KA 2 - Scaling: load balancing
"""


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(root=tmp_path)


@pytest.fixture
def file_store(settings: Settings) -> PlanStore:
    """File-backed store with the sample knowledge base on disk."""
    (settings.root / settings.knowledge_file).write_text(KNOWLEDGE_BASE, encoding="utf-8")
    return PlanStore(settings.root)


@pytest.fixture
def memory_store(settings: Settings) -> PlanStore:
    """In-memory store preloaded with the sample knowledge base."""
    store = PlanStore(settings.root, InMemoryRepository())
    store.repository.put(store.resolve(settings.knowledge_file), KNOWLEDGE_BASE)
    return store
