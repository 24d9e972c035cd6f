import logging

from foodhub.formatting import format_relative_time, parse_timestamp
from foodhub.handlers.datetime_info import restaurant_now
from foodhub.handlers.profile import fetch_profile
from foodhub.handlers.reservation import fetch_reservations
from foodhub.handlers.reviews import fetch_user_reviews
from foodhub.handlers.session import SIGN_IN_REQUIRED, backend_error, current_user
from foodhub.supabase_client import BackendError, get_backend

logger = logging.getLogger(__name__)

TIMELINE_LIMIT = 10
FREQUENT_REVIEWER = 5
REGULAR_DINER = 3


def _preview(text, length=50):
    return f"{(text or '')[:length]}..."


def generate_activities(reservations, reviews, profile, now):
    """Activity feed derived from the user's data, newest first"""
    activities = []
    fallback = now.isoformat()

    for reservation in reservations:
        activities.append({
            "id": f"reservation-{reservation['id']}",
            "type": "reservation",
            "title": "Reservation Made",
            "description": f"Table for {reservation['guests']} guests on {reservation['date']}",
            "timestamp": reservation.get("created_at") or fallback,
            "status": reservation.get("status") or "pending",
            "metadata": {"guests": reservation["guests"], "date": reservation["date"]},
        })

    for review in reviews:
        activities.append({
            "id": f"review-{review['id']}",
            "type": "review",
            "title": "Review Posted",
            "description": f"Gave {review['rating']} stars: \"{_preview(review.get('comment'))}\"",
            "timestamp": review.get("created_at") or fallback,
            "metadata": {"rating": review["rating"]},
        })

    if profile:
        activities.append({
            "id": "profile-created",
            "type": "profile",
            "title": "Profile Created",
            "description": "Welcome to our restaurant family!",
            "timestamp": profile.get("created_at") or fallback,
        })

    if len(reviews) >= FREQUENT_REVIEWER:
        activities.append({
            "id": "achievement-reviewer",
            "type": "achievement",
            "title": "Achievement Unlocked",
            "description": "Frequent Reviewer - Posted 5 reviews",
            "timestamp": reviews[FREQUENT_REVIEWER - 1].get("created_at") or fallback,
            "metadata": {"achievement": "frequent_reviewer"},
        })

    if len(reservations) >= REGULAR_DINER:
        activities.append({
            "id": "achievement-diner",
            "type": "achievement",
            "title": "Achievement Unlocked",
            "description": "Regular Diner - Made 3 reservations",
            "timestamp": reservations[REGULAR_DINER - 1].get("created_at") or fallback,
            "metadata": {"achievement": "regular_diner"},
        })

    def sort_key(activity):
        moment = parse_timestamp(activity["timestamp"])
        return moment if moment.tzinfo else moment.replace(tzinfo=now.tzinfo)

    activities.sort(key=sort_key, reverse=True)
    return activities


def activity_timeline(activities, now):
    shown = activities[:TIMELINE_LIMIT]
    return {
        "activities": [
            {**a, "relative_time": format_relative_time(a["timestamp"], now)} for a in shown
        ],
        "total": len(activities),
        "more_count": len(activities) - len(shown),
    }


async def get_activity(params):
    user = current_user(params)
    if not user:
        return SIGN_IN_REQUIRED

    backend = get_backend(user["access_token"])
    try:
        reservations = fetch_reservations(backend, user["id"])
        reviews = fetch_user_reviews(backend, user["id"])
        profile = fetch_profile(backend, user["id"])
    except BackendError as e:
        logger.error(f"[ACTIVITY] Load failed: {e.message}")
        return backend_error("There was an issue loading your information.", title="Error loading data")

    now = restaurant_now()
    activities = generate_activities(reservations, reviews, profile, now)
    return activity_timeline(activities, now)
