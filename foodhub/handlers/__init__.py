from .datetime_info import get_current_datetime
from .site import get_site_content
from .menu import get_menu, get_menu_item
from .cart import get_cart, add_to_cart, update_cart_item, remove_from_cart, clear_cart
from .reservation import (
    request_reservation, checkout_reservation, get_time_slots,
    list_reservations, cancel_reservation
)
from .reviews import (
    get_featured_reviews, submit_review, list_user_reviews, update_review, delete_review
)
from .profile import (
    get_profile, update_profile, get_notification_settings, update_notification_settings
)
from .notifications import list_notifications, mark_notification_read, mark_all_notifications_read
from .activity import get_activity
from .dashboard import load_dashboard
from .newsletter import subscribe_newsletter
from .auth import sign_up, sign_in, refresh_session, sign_out
from foodhub.otel_instrumentation import instrument_handler

_HANDLERS = [
    get_current_datetime,
    get_site_content,
    get_menu,
    get_menu_item,
    get_cart,
    add_to_cart,
    update_cart_item,
    remove_from_cart,
    clear_cart,
    request_reservation,
    checkout_reservation,
    get_time_slots,
    list_reservations,
    cancel_reservation,
    get_featured_reviews,
    submit_review,
    list_user_reviews,
    update_review,
    delete_review,
    get_profile,
    update_profile,
    get_notification_settings,
    update_notification_settings,
    list_notifications,
    mark_notification_read,
    mark_all_notifications_read,
    get_activity,
    load_dashboard,
    subscribe_newsletter,
    sign_up,
    sign_in,
    refresh_session,
    sign_out,
]

# Registry of all handlers, wrapped with instrumentation
HANDLERS = {func.__name__: instrument_handler(func.__name__)(func) for func in _HANDLERS}


async def execute_handler(handler_name, params):
    """Execute a handler by name"""
    if handler_name in HANDLERS:
        return await HANDLERS[handler_name](params)
    return {"error": f"Unknown handler: {handler_name}"}
