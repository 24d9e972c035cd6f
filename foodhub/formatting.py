from datetime import datetime


def format_ksh(amount):
    """Format an amount in Kenyan shillings, e.g. KSh 1,250"""
    if isinstance(amount, float) and not amount.is_integer():
        return f"KSh {amount:,.2f}"
    return f"KSh {int(amount):,}"


def parse_timestamp(value):
    """Parse an ISO timestamp returned by the backend"""
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def format_relative_time(timestamp, now):
    """Human label for how long ago something happened"""
    moment = parse_timestamp(timestamp)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=now.tzinfo)
    hours = int((now - moment).total_seconds() // 3600)

    if hours < 1:
        return "Just now"
    if hours < 24:
        return f"{hours} hours ago"
    if hours < 168:
        return f"{hours // 24} days ago"
    return moment.strftime("%Y-%m-%d")
