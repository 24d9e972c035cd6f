"""
Reservation pre-order cart.
Items are keyed by menu item + special requests and persisted per browser session.
"""
import json
import logging

from foodhub.restaurant_data import CART_STORAGE

logger = logging.getLogger(__name__)

STORAGE_KEY = "reservation_cart_v1"


def make_key(menu_item_id, name, special_requests=""):
    """Cart key: the same dish with different notes is a separate line"""
    base = menu_item_id if menu_item_id is not None else name
    return f"{base}-{special_requests or ''}"


class Cart:
    def __init__(self, items=None):
        self.items = list(items or [])

    def find(self, key):
        for item in self.items:
            if item["key"] == key:
                return item
        return None

    def add_item(self, name, price, menu_item_id=None, quantity=1, special_requests=""):
        special_requests = special_requests or ""
        quantity = max(1, int(quantity))
        key = make_key(menu_item_id, name, special_requests)

        existing = self.find(key)
        if existing:
            existing["quantity"] += quantity
            return existing

        item = {
            "key": key,
            "menu_item_id": menu_item_id,
            "name": name,
            "price": price,
            "quantity": quantity,
            "special_requests": special_requests,
        }
        self.items.append(item)
        return item

    def update_quantity(self, key, quantity):
        item = self.find(key)
        if item:
            item["quantity"] = max(1, int(quantity))
        return item

    def update_special_requests(self, key, special_requests):
        # Key stays as derived when the item was added
        item = self.find(key)
        if item:
            item["special_requests"] = special_requests or ""
        return item

    def remove_item(self, key):
        before = len(self.items)
        self.items = [i for i in self.items if i["key"] != key]
        return len(self.items) != before

    def clear(self):
        self.items = []

    @staticmethod
    def subtotal(item):
        return item["price"] * item["quantity"]

    @property
    def total(self):
        return sum(self.subtotal(i) for i in self.items)

    @property
    def count(self):
        return sum(i["quantity"] for i in self.items)

    def is_empty(self):
        return not self.items

    def to_json(self):
        return json.dumps(self.items)

    @classmethod
    def from_json(cls, raw):
        if not raw:
            return cls()
        try:
            items = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("[CART] Discarding unreadable stored cart")
            return cls()
        if not isinstance(items, list):
            return cls()
        return cls([i for i in items if isinstance(i, dict) and "key" in i])


def load_cart(session_id):
    """Load the cart stored for a browser session"""
    area = CART_STORAGE.get(session_id, {})
    return Cart.from_json(area.get(STORAGE_KEY))


def save_cart(session_id, cart):
    CART_STORAGE.setdefault(session_id, {})[STORAGE_KEY] = cart.to_json()
