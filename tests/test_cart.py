"""
Tests for the reservation pre-order cart
"""
import asyncio

from foodhub import restaurant_data
from foodhub.cart import STORAGE_KEY, Cart, load_cart, make_key, save_cart
from foodhub.handlers.cart import add_to_cart, clear_cart, get_cart, remove_from_cart, update_cart_item


def test_key_combines_item_and_special_requests():
    assert make_key(1, "Samosas", "no onions") == "1-no onions"
    assert make_key(1, "Samosas") == "1-"
    assert make_key(None, "Chef special", "") == "Chef special-"
    assert make_key(0, "Zero id") == "0-"


def test_same_item_and_notes_merges_quantity():
    cart = Cart()
    cart.add_item("Samosas", 250, menu_item_id=1, quantity=2)
    cart.add_item("Samosas", 250, menu_item_id=1, quantity=3)

    assert len(cart.items) == 1
    assert cart.items[0]["quantity"] == 5
    assert cart.total == 1250


def test_different_notes_make_separate_lines():
    cart = Cart()
    cart.add_item("Pilau", 650, menu_item_id=6)
    cart.add_item("Pilau", 650, menu_item_id=6, special_requests="extra spicy")

    assert [i["key"] for i in cart.items] == ["6-", "6-extra spicy"]
    assert cart.count == 2


def test_quantity_never_drops_below_one():
    cart = Cart()
    item = cart.add_item("Kenyan Chai", 180, menu_item_id=12, quantity=0)
    assert item["quantity"] == 1

    cart.update_quantity(item["key"], -4)
    assert cart.find(item["key"])["quantity"] == 1

    cart.update_quantity(item["key"], 3)
    assert cart.total == 540


def test_updating_notes_keeps_original_key():
    cart = Cart()
    item = cart.add_item("Mandazi", 200, menu_item_id=15)
    cart.update_special_requests(item["key"], "warm please")

    assert cart.items[0]["key"] == "15-"
    assert cart.items[0]["special_requests"] == "warm please"


def test_unknown_keys_are_ignored():
    cart = Cart()
    cart.add_item("Mandazi", 200, menu_item_id=15)

    assert cart.update_quantity("missing", 5) is None
    assert cart.remove_item("missing") is False
    assert cart.total == 200


def test_storage_round_trip_and_corrupt_data():
    cart = Cart()
    cart.add_item("Githeri", 380, menu_item_id=9, quantity=2)
    save_cart("session-a", cart)

    assert STORAGE_KEY in restaurant_data.CART_STORAGE["session-a"]
    assert load_cart("session-a").total == 760
    assert load_cart("session-unknown").items == []

    restaurant_data.CART_STORAGE["session-b"] = {STORAGE_KEY: "{not json"}
    assert load_cart("session-b").items == []


def test_add_to_cart_handler_uses_menu_prices():
    result = asyncio.run(add_to_cart({
        "session_id": "s1", "menu_item_id": 5, "quantity": 2, "special_requests": " well done ",
    }))

    assert result["total"] == 1700
    assert result["total_display"] == "KSh 1,700"
    assert result["item_added"]["key"] == "5-well done"
    assert result["items"][0]["subtotal"] == 1700


def test_add_to_cart_rejects_unknown_item_and_bad_quantity():
    missing = asyncio.run(add_to_cart({"session_id": "s1", "menu_item_id": 99}))
    assert missing["code"] == "not_found"

    bad = asyncio.run(add_to_cart({"session_id": "s1", "menu_item_id": 1, "quantity": "lots"}))
    assert "error" in bad


def test_update_remove_and_clear_handlers():
    asyncio.run(add_to_cart({"session_id": "s2", "menu_item_id": 1}))
    asyncio.run(add_to_cart({"session_id": "s2", "menu_item_id": 11, "quantity": 2}))

    updated = asyncio.run(update_cart_item({"session_id": "s2", "key": "1-", "quantity": 4, "special_requests": "mild"}))
    samosas = [i for i in updated["items"] if i["key"] == "1-"][0]
    assert samosas["quantity"] == 4
    assert samosas["special_requests"] == "mild"

    removed = asyncio.run(remove_from_cart({"session_id": "s2", "key": "11-"}))
    assert [i["key"] for i in removed["items"]] == ["1-"]

    cleared = asyncio.run(clear_cart({"session_id": "s2"}))
    assert cleared["items"] == []
    assert asyncio.run(get_cart({"session_id": "s2"}))["total"] == 0


def test_carts_are_isolated_per_session():
    asyncio.run(add_to_cart({"session_id": "alice", "menu_item_id": 1}))

    assert asyncio.run(get_cart({"session_id": "bob"}))["items"] == []
    assert asyncio.run(remove_from_cart({"session_id": "bob", "key": "1-"}))["code"] == "not_found"


def test_notes_only_update_keeps_quantity():
    asyncio.run(add_to_cart({"session_id": "s3", "menu_item_id": 1, "quantity": 4}))

    result = asyncio.run(update_cart_item({"session_id": "s3", "key": "1-", "quantity": None, "special_requests": "mild"}))

    assert result["items"][0]["quantity"] == 4
    assert result["items"][0]["special_requests"] == "mild"
