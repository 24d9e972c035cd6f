import logging

from pydantic import EmailStr, TypeAdapter, ValidationError

from foodhub.restaurant_data import NEWSLETTER_SUBSCRIBERS

logger = logging.getLogger(__name__)

EMAIL_ADAPTER = TypeAdapter(EmailStr)


async def subscribe_newsletter(params):
    """Subscribe an email address to the newsletter"""
    try:
        email = EMAIL_ADAPTER.validate_python(str(params.get("email") or "").strip()).lower()
    except ValidationError:
        return {"error": "Please enter a valid email address"}

    already = email in NEWSLETTER_SUBSCRIBERS
    NEWSLETTER_SUBSCRIBERS.add(email)
    if not already:
        logger.info(f"[NEWSLETTER] New subscriber ({len(NEWSLETTER_SUBSCRIBERS)} total)")
    return {
        "success": True,
        "title": "Subscribed Successfully!",
        "message": "Thank you for subscribing to our newsletter.",
    }
