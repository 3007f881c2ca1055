# tests/unit/services/test_ai_assistant.py
import json
from datetime import datetime
from types import SimpleNamespace

import pytest

from arm_backend.services.ai_assistant import PARTY_MOTTO, build_system_prompt, extract_delta, sse_event


def test_prompt_groups_program_by_category():
    leaders = [SimpleNamespace(name="Lassine Diakité", position="Président", location="Spain")]
    program = [
        SimpleNamespace(category="Santé", title="Hôpitaux", description="Un hôpital par cercle"),
        SimpleNamespace(category="Éducation", title="Écoles", description="Écoles rurales"),
        SimpleNamespace(category="Santé", title="Vaccins", description="Campagnes"),
    ]
    events = [SimpleNamespace(title="Congrès", date=datetime(2026, 12, 5, 9, 0), location="Bamako")]

    prompt = build_system_prompt(leaders, program, events)

    assert "- Président: Lassine Diakité (Spain)" in prompt
    assert "Santé:\n- Hôpitaux: Un hôpital par cercle\n- Vaccins: Campagnes" in prompt
    assert "- Congrès on 2026-12-05 at Bamako" in prompt
    assert PARTY_MOTTO in prompt
    assert "Additional context" not in prompt


def test_prompt_without_events_and_with_context():
    prompt = build_system_prompt([], [], [], context="Question posée depuis l'application mobile")
    assert "No upcoming events scheduled" in prompt
    assert prompt.endswith("Additional context: Question posée depuis l'application mobile")


@pytest.mark.parametrize("line, expected", [
    ('data: {"choices": [{"delta": {"content": "Bon"}}]}', "Bon"),
    ('data: {"choices": [{"delta": {"role": "assistant"}}]}', None),
    ('data: {"choices": []}', None),
    ("data: [DONE]", None),
    (": keep-alive", None),
    ("", None),
])
def test_extract_delta(line, expected):
    assert extract_delta(line) == expected


def test_extract_delta_rejects_broken_json():
    with pytest.raises(json.JSONDecodeError):
        extract_delta("data: {not json")


def test_sse_event():
    assert sse_event({"text": "Salut"}) == 'data: {"text": "Salut"}\n\n'
