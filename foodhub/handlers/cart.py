import logging

from foodhub.cart import load_cart, save_cart
from foodhub.formatting import format_ksh
from foodhub.handlers.menu import find_menu_item

logger = logging.getLogger(__name__)


def present_cart(cart):
    return {
        "items": [
            {**item, "subtotal": cart.subtotal(item), "subtotal_display": format_ksh(cart.subtotal(item))}
            for item in cart.items
        ],
        "count": cart.count,
        "total": cart.total,
        "total_display": format_ksh(cart.total),
    }


def _quantity(value, default=1):
    if value is None or value == "":
        return default
    try:
        return max(1, int(value))
    except (TypeError, ValueError):
        return None


async def get_cart(params):
    return present_cart(load_cart(params["session_id"]))


async def add_to_cart(params):
    """Add a menu item to the session cart"""
    item = find_menu_item(params.get("menu_item_id"))
    if not item:
        return {"error": f"Item {params.get('menu_item_id')} not found in menu", "code": "not_found"}

    quantity = _quantity(params.get("quantity"))
    if quantity is None:
        return {"error": "Quantity must be a whole number"}

    cart = load_cart(params["session_id"])
    line = cart.add_item(
        name=item["name"],
        price=item["price"],
        menu_item_id=item["id"],
        quantity=quantity,
        special_requests=(params.get("special_requests") or "").strip(),
    )
    save_cart(params["session_id"], cart)

    logger.info(f"[CART] Added {quantity}x {item['name']} ({line['key']})")
    return {
        **present_cart(cart),
        "item_added": line,
        "message": f"Added {quantity}x {item['name']} to your order",
    }


async def update_cart_item(params):
    """Change quantity and/or special requests of a cart line"""
    key = params.get("key")
    cart = load_cart(params["session_id"])
    if not cart.find(key):
        return {"error": f"Cart item {key} not found", "code": "not_found"}

    if params.get("quantity") is not None:
        quantity = _quantity(params.get("quantity"))
        if quantity is None:
            return {"error": "Quantity must be a whole number"}
        cart.update_quantity(key, quantity)
    if "special_requests" in params:
        cart.update_special_requests(key, params.get("special_requests"))

    save_cart(params["session_id"], cart)
    return present_cart(cart)


async def remove_from_cart(params):
    key = params.get("key")
    cart = load_cart(params["session_id"])
    if not cart.remove_item(key):
        return {"error": f"Cart item {key} not found", "code": "not_found"}
    save_cart(params["session_id"], cart)
    logger.info(f"[CART] Removed {key}")
    return present_cart(cart)


async def clear_cart(params):
    cart = load_cart(params["session_id"])
    cart.clear()
    save_cart(params["session_id"], cart)
    return present_cart(cart)
