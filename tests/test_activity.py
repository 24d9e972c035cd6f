"""
Tests for the dashboard activity timeline
"""
import asyncio
from datetime import datetime, timedelta, timezone

from foodhub.handlers.activity import activity_timeline, generate_activities, get_activity

NOW = datetime(2024, 6, 15, 10, 0, tzinfo=timezone(timedelta(hours=3)))


def reservation(n):
    return {"id": f"r{n}", "guests": 2, "date": f"2024-05-{n:02d}", "status": "confirmed",
            "created_at": f"2024-05-{n:02d}T12:00:00+00:00"}


def review(n):
    return {"id": f"v{n}", "rating": 4, "comment": "Lovely evening",
            "created_at": f"2024-04-{n:02d}T12:00:00+00:00"}


def test_activities_cover_reservations_reviews_and_profile():
    activities = generate_activities(
        [reservation(3)], [review(1)], {"created_at": "2024-01-01T00:00:00+00:00"}, NOW,
    )

    assert [a["type"] for a in activities] == ["reservation", "review", "profile"]
    assert activities[0]["description"] == "Table for 2 guests on 2024-05-03"
    assert activities[1]["description"] == 'Gave 4 stars: "Lovely evening..."'


def test_achievements_unlock_at_thresholds():
    activities = generate_activities(
        [reservation(n) for n in (1, 2, 3)], [review(n) for n in range(1, 6)], None, NOW,
    )
    achievements = {a["id"]: a for a in activities if a["type"] == "achievement"}

    assert achievements["achievement-diner"]["description"] == "Regular Diner - Made 3 reservations"
    assert achievements["achievement-reviewer"]["description"] == "Frequent Reviewer - Posted 5 reviews"
    assert achievements["achievement-diner"]["timestamp"] == reservation(3)["created_at"]

    fewer = generate_activities([reservation(1)], [review(1)], None, NOW)
    assert not [a for a in fewer if a["type"] == "achievement"]


def test_timeline_limited_to_ten():
    activities = generate_activities(
        [reservation(n) for n in range(1, 9)], [review(n) for n in range(1, 6)], None, NOW,
    )
    timeline = activity_timeline(activities, NOW)

    assert len(timeline["activities"]) == 10
    assert timeline["total"] == 15
    assert timeline["more_count"] == 5
    assert timeline["activities"][0]["id"] == "reservation-r8"
    assert timeline["activities"][0]["relative_time"] == "2024-05-08"


def test_get_activity(backend, user):
    backend.rows("profiles").append({"id": "p1", "user_id": "user-1", "created_at": "2024-01-01T00:00:00+00:00"})

    result = asyncio.run(get_activity({"user": user}))

    assert [a["id"] for a in result["activities"]] == ["profile-created"]
    assert asyncio.run(get_activity({}))["code"] == "unauthorized"
