from datetime import datetime, timedelta, timezone
import logging

from foodhub import config

logger = logging.getLogger(__name__)


def restaurant_timezone():
    """Fixed-offset timezone from TIMEZONE_OFFSET (e.g. +03:00)"""
    offset = config.TIMEZONE_OFFSET
    sign = -1 if offset.startswith("-") else 1
    hours, _, minutes = offset.lstrip("+-").partition(":")
    return timezone(sign * timedelta(hours=int(hours), minutes=int(minutes or 0)))


def restaurant_now():
    return datetime.now(restaurant_timezone())


async def get_current_datetime(params):
    """Get current date and time at the restaurant"""
    now = restaurant_now()
    result = {
        "datetime": now.isoformat(),
        "date": now.strftime("%Y-%m-%d"),
        "time": now.strftime("%H:%M"),
        "day_of_week": now.strftime("%A"),
        "timezone": f"{config.TIMEZONE_NAME} ({config.TIMEZONE_OFFSET})"
    }
    logger.debug(f"[DATETIME] {result}")
    return result
