import logging

from foodhub.handlers.activity import activity_timeline, generate_activities
from foodhub.handlers.datetime_info import restaurant_now
from foodhub.handlers.notifications import generate_notifications, notification_feed
from foodhub.handlers.profile import fetch_profile, settings_for
from foodhub.handlers.reservation import fetch_reservations, present_reservation
from foodhub.handlers.reviews import fetch_user_reviews, review_stats
from foodhub.handlers.session import SIGN_IN_REQUIRED, backend_error, current_user
from foodhub.restaurant_data import NOTIFICATION_READS
from foodhub.supabase_client import BackendError, get_backend

logger = logging.getLogger(__name__)


async def load_dashboard(params):
    """Everything the customer dashboard shows, in one call"""
    user = current_user(params)
    if not user:
        return SIGN_IN_REQUIRED

    backend = get_backend(user["access_token"])
    try:
        profile = fetch_profile(backend, user["id"])
        reservations = fetch_reservations(backend, user["id"])
        reviews = fetch_user_reviews(backend, user["id"])
    except BackendError as e:
        logger.error(f"[DASHBOARD] Load failed for {user['id']}: {e.message}")
        return backend_error("There was an issue loading your information.", title="Error loading data")

    now = restaurant_now()
    today = now.date()
    notifications = generate_notifications(
        reservations, reviews, now, NOTIFICATION_READS.get(user["id"], set())
    )
    activities = generate_activities(reservations, reviews, profile, now)

    logger.info(
        f"[DASHBOARD] {user['id']}: {len(reservations)} reservations, {len(reviews)} reviews"
    )
    return {
        "greeting": f"Welcome back, {(profile or {}).get('full_name') or user.get('email')}!",
        "email": user.get("email"),
        "profile": profile,
        "notification_settings": settings_for(user["id"]),
        "reservations": [present_reservation(r, today) for r in reservations],
        "reviews": reviews,
        "review_stats": review_stats(reviews),
        "notifications": notification_feed(notifications, now),
        "activity": activity_timeline(activities, now),
    }
