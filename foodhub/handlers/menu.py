import logging

from foodhub.formatting import format_ksh
from foodhub.restaurant_data import MENU_CATEGORIES, MENU_ITEMS

logger = logging.getLogger(__name__)

CATEGORY_IDS = [c["id"] for c in MENU_CATEGORIES]


def filter_menu(items, search="", category="all"):
    """Items whose name or description contains the search term, in the given category"""
    term = (search or "").lower()
    category = category or "all"
    return [
        item for item in items
        if (term in item["name"].lower() or term in item["description"].lower())
        and (category == "all" or item["category"] == category)
    ]


def find_menu_item(item_id):
    for item in MENU_ITEMS:
        if str(item["id"]) == str(item_id):
            return item
    return None


def present_item(item):
    return {**item, "price_display": format_ksh(item["price"])}


async def get_menu(params):
    """Browse the menu with optional search term and category"""
    search = params.get("search") or ""
    category = params.get("category") or "all"

    if category not in CATEGORY_IDS:
        return {
            "error": f"Unknown category {category}. Available categories: {', '.join(CATEGORY_IDS)}"
        }

    items = filter_menu(MENU_ITEMS, search, category)
    logger.info(f"[MENU] search={search!r} category={category} -> {len(items)} items")
    return {
        "search": search,
        "category": category,
        "categories": MENU_CATEGORIES,
        "count": len(items),
        "items": [present_item(i) for i in items],
    }


async def get_menu_item(params):
    item = find_menu_item(params.get("item_id"))
    if not item:
        return {"error": f"Item {params.get('item_id')} not found in menu", "code": "not_found"}
    return {"item": present_item(item)}
