import logging
from datetime import date as date_cls

from foodhub.cart import load_cart, save_cart
from foodhub.formatting import format_ksh
from foodhub.handlers.datetime_info import restaurant_now
from foodhub.handlers.session import SIGN_IN_REQUIRED, backend_error, current_user
from foodhub.restaurant_data import (
    DEFAULT_TIME, PAYMENT_OPTIONS, RESERVATION_STATUSES, TIME_SLOTS,
)
from foodhub.supabase_client import BackendError, get_backend

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ["full_name", "email", "phone", "date", "time"]
RESERVATION_SELECT = "*, reservation_orders(*, order_items(*))"
ORDER_PREVIEW_ITEMS = 3


def validate_booking(form):
    """Check the booking form; returns an error message or None"""
    missing = [f for f in REQUIRED_FIELDS if not str(form.get(f) or "").strip()]
    if missing:
        return f"Please fill in: {', '.join(missing)}"
    if form["time"] not in TIME_SLOTS:
        return f"Time slot {form['time']} not available. Available times: {', '.join(TIME_SLOTS)}"
    if not isinstance(form["date"], str):
        return "Date must be in YYYY-MM-DD format"
    try:
        date_cls.fromisoformat(form["date"])
    except ValueError:
        return "Date must be in YYYY-MM-DD format"
    if parse_guests(form.get("guests")) is None:
        return "Number of guests must be a positive whole number"
    return None


def parse_guests(value):
    if value is None or value == "":
        return 1
    try:
        guests = int(value)
    except (TypeError, ValueError):
        return None
    return guests if guests >= 1 else None


def booking_form(params):
    form = {
        "full_name": params.get("full_name", ""),
        "email": params.get("email", ""),
        "phone": params.get("phone", ""),
        "guests": params.get("guests", "1"),
        "date": params.get("date", ""),
        "time": params.get("time") or DEFAULT_TIME,
        "special_requests": params.get("special_requests", ""),
    }
    user = current_user(params)
    if user and not form["email"]:
        form["email"] = user.get("email") or ""
    return form


def reservation_row(form, user):
    return {
        "user_id": user["id"] if user else None,
        "guest_name": form["full_name"],
        "guest_email": form["email"],
        "guest_phone": form["phone"],
        "date": form["date"],
        "time": form["time"],
        "guests": parse_guests(form["guests"]),
        "special_requests": form["special_requests"] or None,
    }


def order_item_rows(order_id, cart):
    return [
        {
            "order_id": order_id,
            # Local menu ids are integers and have no backend row
            "menu_item_id": None if isinstance(item["menu_item_id"], int) else item["menu_item_id"],
            "name": item["name"],
            "price": item["price"],
            "quantity": item["quantity"],
            "special_requests": item["special_requests"] or None,
            "subtotal": cart.subtotal(item),
        }
        for item in cart.items
    ]


async def request_reservation(params):
    """Send a table reservation request"""
    form = booking_form(params)
    problem = validate_booking(form)
    if problem:
        return {"error": problem}

    user = current_user(params)
    backend = get_backend(user["access_token"] if user else None)
    try:
        backend.table("reservations").insert(reservation_row(form, user)).execute()
    except BackendError as e:
        logger.error(f"[RESERVATION] Request failed: {e.message}")
        return backend_error("Could not send your reservation request. Please try again.")

    logger.info(f"[RESERVATION] Request from {form['full_name']} for {form['date']} {form['time']}")
    return {
        "success": True,
        "title": "Reservation Request Sent!",
        "message": "We'll contact you shortly to confirm your booking.",
    }


async def checkout_reservation(params):
    """Reserve a table together with the pre-ordered cart"""
    form = booking_form(params)
    problem = validate_booking(form)
    if problem:
        return {"error": problem}

    user = current_user(params)
    if not user:
        return {**SIGN_IN_REQUIRED, "error": "Please sign in to save your reservation and order."}

    payment_option = params.get("payment_option") or "pay_later"
    if payment_option not in PAYMENT_OPTIONS:
        return {"error": f"Payment option must be one of: {', '.join(PAYMENT_OPTIONS)}"}

    session_id = params["session_id"]
    cart = load_cart(session_id)
    if cart.is_empty():
        return {
            "error": "Please add at least one item to your order.",
            "title": "Cart is empty",
        }

    backend = get_backend(user["access_token"])
    try:
        reservation = (
            backend.table("reservations")
            .insert(reservation_row(form, user))
            .select("id")
            .single()
            .execute()
        )
        reservation_id = reservation["id"]

        order = (
            backend.table("reservation_orders")
            .insert({
                "reservation_id": reservation_id,
                "user_id": user["id"],
                "total_amount": cart.total,
                "payment_option": payment_option,
                "payment_status": "pending",
                "notes": None,
            })
            .select("id")
            .single()
            .execute()
        )
        order_id = order["id"]

        backend.table("order_items").insert(order_item_rows(order_id, cart)).execute()
    except BackendError as e:
        logger.error(f"[RESERVATION] Checkout failed: {e.message}")
        return backend_error("Could not complete reservation. Please try again.")

    total = cart.total
    cart.clear()
    save_cart(session_id, cart)

    logger.info(f"[RESERVATION] Confirmed {reservation_id} with order {order_id} ({format_ksh(total)})")
    return {
        "success": True,
        "reservation_id": reservation_id,
        "order_id": order_id,
        "total_amount": total,
        "total_display": format_ksh(total),
        "payment_option": payment_option,
        "title": "Reservation Confirmed",
        "message": "Your table and pre-order have been saved. See you soon!",
    }


async def get_time_slots(params):
    return {"time_slots": TIME_SLOTS, "default_time": DEFAULT_TIME, "payment_options": PAYMENT_OPTIONS}


def summarize_order(order):
    items = order.get("order_items") or []
    hidden = max(0, len(items) - ORDER_PREVIEW_ITEMS)
    summary = {
        "id": order.get("id"),
        "payment_status": order.get("payment_status"),
        "total_amount": order.get("total_amount"),
        "total_display": format_ksh(order.get("total_amount") or 0),
        "item_count": len(items),
        "items_label": f"{len(items)} item{'s' if len(items) != 1 else ''}",
        "preview": items[:ORDER_PREVIEW_ITEMS],
        "items": items,
    }
    if hidden:
        summary["more_label"] = f"+{hidden} more item{'s' if hidden != 1 else ''}"
    return summary


def filter_reservations(reservations, search="", status="all"):
    term = (search or "").lower()

    def matches(r):
        matches_search = (
            term in (r.get("guest_name") or "").lower()
            or term in (r.get("date") or "")
            or term in (r.get("special_requests") or "").lower()
        )
        return matches_search and (status == "all" or r.get("status") == status)

    return [r for r in reservations if matches(r)]


def is_past(reservation, today):
    return date_cls.fromisoformat(reservation["date"]) < today


def split_by_date(reservations, today):
    upcoming = [r for r in reservations if not is_past(r, today)]
    past = [r for r in reservations if is_past(r, today)]
    return upcoming, past


def fetch_reservations(backend, user_id):
    return (
        backend.table("reservations")
        .select(RESERVATION_SELECT)
        .eq("user_id", user_id)
        .order("date", desc=True)
        .execute()
    ) or []


def present_reservation(reservation, today):
    past = is_past(reservation, today)
    return {
        **reservation,
        "is_past": past,
        "can_cancel": not past and reservation.get("status") != "cancelled",
        "orders": [summarize_order(o) for o in reservation.get("reservation_orders") or []],
    }


async def list_reservations(params):
    """The signed-in user's reservations, filtered and split into upcoming/past"""
    user = current_user(params)
    if not user:
        return SIGN_IN_REQUIRED

    status = params.get("status") or "all"
    if status != "all" and status not in RESERVATION_STATUSES:
        return {"error": f"Status must be one of: all, {', '.join(RESERVATION_STATUSES)}"}

    try:
        reservations = fetch_reservations(get_backend(user["access_token"]), user["id"])
    except BackendError as e:
        logger.error(f"[RESERVATION] Listing failed: {e.message}")
        return backend_error("There was an issue loading your information.", title="Error loading data")

    today = restaurant_now().date()
    filtered = filter_reservations(reservations, params.get("search"), status)
    upcoming, past = split_by_date(filtered, today)
    return {
        "total": len(reservations),
        "count": len(filtered),
        "upcoming": [present_reservation(r, today) for r in upcoming],
        "past": [present_reservation(r, today) for r in past],
    }


async def cancel_reservation(params):
    """Cancel one of the signed-in user's upcoming reservations"""
    user = current_user(params)
    if not user:
        return SIGN_IN_REQUIRED

    reservation_id = params.get("reservation_id")
    backend = get_backend(user["access_token"])
    try:
        rows = (
            backend.table("reservations")
            .select("id, date, status, user_id")
            .eq("id", reservation_id)
            .eq("user_id", user["id"])
            .execute()
        ) or []
        if not rows:
            return {"error": f"Reservation {reservation_id} not found", "code": "not_found"}

        reservation = rows[0]
        if reservation.get("status") == "cancelled":
            return {"error": "This reservation is already cancelled."}
        if is_past(reservation, restaurant_now().date()):
            return {"error": "Past reservations cannot be cancelled."}

        backend.table("reservations").update({"status": "cancelled"}).eq("id", reservation_id).execute()
    except BackendError as e:
        logger.error(f"[RESERVATION] Cancel {reservation_id} failed: {e.message}")
        return backend_error("Failed to cancel reservation. Please try again.")

    logger.info(f"[RESERVATION] Cancelled {reservation_id}")
    return {
        "success": True,
        "reservation_id": reservation_id,
        "title": "Reservation cancelled",
        "message": "Your reservation has been cancelled successfully.",
    }
