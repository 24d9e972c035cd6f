"""
Dashboard notifications.

Notifications are not stored by the backend: they are derived from the user's
reservations and reviews each time the dashboard asks for them. Only the read
state is remembered, in service memory, keyed by user id.
"""
import logging
import math
from datetime import datetime, timedelta

from foodhub.formatting import format_relative_time, parse_timestamp
from foodhub.handlers.datetime_info import restaurant_now
from foodhub.handlers.reservation import fetch_reservations
from foodhub.handlers.reviews import fetch_user_reviews
from foodhub.handlers.session import SIGN_IN_REQUIRED, backend_error, current_user
from foodhub.restaurant_data import NOTIFICATION_READS
from foodhub.supabase_client import BackendError, get_backend

logger = logging.getLogger(__name__)

PREVIEW_COUNT = 5
LOYALTY_RESERVATIONS = 3
READ_BY_DEFAULT = {"welcome"}


def _aware(moment, now):
    return moment if moment.tzinfo else moment.replace(tzinfo=now.tzinfo)


def days_until(reservation_date, now):
    """Whole days (rounded up) from now until midnight of the reservation date"""
    day = datetime.fromisoformat(reservation_date).replace(tzinfo=now.tzinfo)
    return math.ceil((day - now).total_seconds() / 86400)


def generate_notifications(reservations, reviews, now, read_ids=()):
    notifications = []

    def add(notification_id, kind, title, message, timestamp, metadata=None):
        notifications.append({
            "id": notification_id,
            "type": kind,
            "title": title,
            "message": message,
            "timestamp": timestamp.isoformat(),
            "read": notification_id in read_ids or notification_id in READ_BY_DEFAULT,
            "metadata": metadata or {},
        })

    for reservation in reservations:
        if reservation.get("status") == "confirmed" and days_until(reservation["date"], now) == 1:
            add(
                f"reminder-{reservation['id']}", "reminder", "Reservation Reminder",
                f"Your reservation for {reservation['guests']} guests is tomorrow at {reservation['time']}",
                now - timedelta(hours=2),
                {"reservation_id": reservation["id"]},
            )
        if reservation.get("status") == "pending":
            add(
                f"pending-{reservation['id']}", "info", "Reservation Pending",
                f"Your reservation for {reservation['date']} is awaiting confirmation",
                _aware(parse_timestamp(reservation["created_at"]), now),
                {"reservation_id": reservation["id"]},
            )

    for review in reviews:
        add(
            f"review-ack-{review['id']}", "success", "Review Published",
            f"Thank you for your {review['rating']}-star review! It helps other diners choose our restaurant.",
            _aware(parse_timestamp(review["created_at"]), now) + timedelta(hours=1),
            {"review_id": review["id"]},
        )

    add(
        "welcome", "info", "Welcome to Our Restaurant!",
        "Thank you for joining our family. Enjoy exclusive offers and priority reservations.",
        now - timedelta(days=7),
    )

    if len(reservations) >= LOYALTY_RESERVATIONS:
        add(
            "loyalty", "success", "Loyalty Milestone Reached!",
            "You've made 3 reservations! You're now eligible for our loyalty program.",
            now - timedelta(days=1),
        )

    add(
        "promo-weekend", "info", "Weekend Special Offer",
        "Get 20% off your next weekend reservation. Use code WEEKEND20 at checkout.",
        now - timedelta(hours=6),
    )

    notifications.sort(key=lambda n: parse_timestamp(n["timestamp"]), reverse=True)
    return notifications


def notification_feed(notifications, now, show_all=False):
    shown = notifications if show_all else notifications[:PREVIEW_COUNT]
    return {
        "notifications": [
            {**n, "relative_time": format_relative_time(n["timestamp"], now)} for n in shown
        ],
        "unread_count": sum(1 for n in notifications if not n["read"]),
        "total": len(notifications),
        "hidden_count": len(notifications) - len(shown),
    }


def _truthy(value):
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


def _load_user_activity(user):
    backend = get_backend(user["access_token"])
    return fetch_reservations(backend, user["id"]), fetch_user_reviews(backend, user["id"])


async def list_notifications(params):
    user = current_user(params)
    if not user:
        return SIGN_IN_REQUIRED
    try:
        reservations, reviews = _load_user_activity(user)
    except BackendError as e:
        logger.error(f"[NOTIFICATIONS] Load failed: {e.message}")
        return backend_error("There was an issue loading your information.", title="Error loading data")

    now = restaurant_now()
    notifications = generate_notifications(
        reservations, reviews, now, NOTIFICATION_READS.get(user["id"], set())
    )
    return notification_feed(notifications, now, _truthy(params.get("show_all")))


async def mark_notification_read(params):
    user = current_user(params)
    if not user:
        return SIGN_IN_REQUIRED
    notification_id = params.get("notification_id")
    if not notification_id:
        return {"error": "Notification id is required"}
    NOTIFICATION_READS.setdefault(user["id"], set()).add(notification_id)
    return {"success": True, "notification_id": notification_id}


async def mark_all_notifications_read(params):
    user = current_user(params)
    if not user:
        return SIGN_IN_REQUIRED
    try:
        reservations, reviews = _load_user_activity(user)
    except BackendError as e:
        logger.error(f"[NOTIFICATIONS] Load failed: {e.message}")
        return backend_error("There was an issue loading your information.", title="Error loading data")

    notifications = generate_notifications(reservations, reviews, restaurant_now())
    reads = NOTIFICATION_READS.setdefault(user["id"], set())
    reads.update(n["id"] for n in notifications)
    return {"success": True, "marked": len(notifications), "unread_count": 0}
