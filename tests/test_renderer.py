"""Tests for core.renderer."""
import re
from datetime import date

import pytest

from core.models import ROLES, ScheduleEntry
from core.renderer import ROLE_PRACTICE, render_plan

SCHEDULE = [
    ScheduleEntry(week=1, topic_title="Testing"),
    ScheduleEntry(week=2, topic_title="Scaling"),
    ScheduleEntry(week=3, topic_title="Testing"),
]


def _render(role: str = "backend", schedule=SCHEDULE, focus=("test", "scal")) -> str:
    return render_plan(role, date(2024, 6, 1), len(schedule), list(focus), schedule)


def test_header() -> None:
    text = _render()
    lines = text.splitlines()

    assert lines[0] == "# Study Plan for BACKEND Developer"
    assert lines[1] == "Generated on: 2024-06-01"
    assert lines[2] == "Duration: 3 weeks"


def test_single_week_is_singular() -> None:
    text = _render(schedule=[ScheduleEntry(week=1, topic_title="Testing")])

    assert "Duration: 1 week\n" in text


def test_focus_areas_listed_in_request_order() -> None:
    text = _render(focus=("zeta", "alpha"))

    section = text.split("## Focus Areas\n", 1)[1].split("\n\n", 1)[0]
    assert section.splitlines() == ["- zeta", "- alpha"]


def test_week_blocks_round_trip() -> None:
    text = _render()

    breakdown = text.split("## Weekly Breakdown", 1)[1].split("## Resources", 1)[0]
    blocks = re.findall(r"^### Week (\d+): (.+)$", breakdown, flags=re.MULTILINE)

    assert blocks == [("1", "Testing"), ("2", "Scaling"), ("3", "Testing")]


def test_week_block_has_four_actions_in_order() -> None:
    text = _render(role="devops")

    block = text.split("### Week 2: Scaling\n", 1)[1].split("\n\n", 1)[0]
    assert block.splitlines() == [
        "- Study the concept in depth",
        "- Complete practice exercises",
        f"- {ROLE_PRACTICE['devops']}",
        "- Review what you built and note open questions",
    ]


@pytest.mark.parametrize("role", ROLES)
def test_every_role_renders(role: str) -> None:
    text = _render(role=role)

    assert f"# Study Plan for {role.upper()} Developer" in text
    assert ROLE_PRACTICE[role] in text


def test_resources_section_is_last() -> None:
    text = _render()

    assert text.rstrip().endswith("- Hands-on projects")
    assert "## Resources\n- Concepts from the knowledge base" in text


def test_rendering_is_deterministic() -> None:
    assert _render() == _render()


def test_unknown_role_raises() -> None:
    with pytest.raises(KeyError):
        _render(role="designer")
