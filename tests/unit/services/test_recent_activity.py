# tests/unit/services/test_recent_activity.py
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from arm_backend.services.analytics_service import RECENT_ACTIVITY_LIMIT, build_recent_activity

BASE = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def message(minutes, subject="Question"):
    return SimpleNamespace(subject=subject, sender_name="Oumar", created_at=BASE + timedelta(minutes=minutes))


def news(minutes, title="Congrès"):
    # Naive, as SQLite returns it
    return SimpleNamespace(title=title, published_at=(BASE + timedelta(minutes=minutes)).replace(tzinfo=None))


def event(minutes, title="Meeting"):
    return SimpleNamespace(title=title, date=datetime(2026, 4, 2, 9, 0), created_at=BASE + timedelta(minutes=minutes))


def test_merged_newest_first():
    activity = build_recent_activity([message(1)], [news(3)], [event(2)])

    assert [a["type"] for a in activity] == ["news", "event", "message"]
    assert activity[0]["timestamp"] == BASE + timedelta(minutes=3)
    assert activity[1]["description"] == "Scheduled for 2026-04-02"
    assert activity[2]["description"] == "From: Oumar"


def test_each_source_capped_at_five():
    messages = [message(n, subject=f"m{n}") for n in range(8)]
    activity = build_recent_activity(messages, [], [])
    assert [a["title"] for a in activity] == ["m7", "m6", "m5", "m4", "m3"]


def test_empty_sources():
    assert build_recent_activity([], [], []) == []


def test_overall_limit():
    activity = build_recent_activity(
        [message(n) for n in range(10)], [news(n) for n in range(10)], [event(n) for n in range(10)]
    )
    assert len(activity) == 15 <= RECENT_ACTIVITY_LIMIT
