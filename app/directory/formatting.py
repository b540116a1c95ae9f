"""
Display helpers for the directory table. Presentation only; nothing here is
part of the wire contract.
"""
from typing import Any, Optional

from app.utils.validators import parse_date

CURRENCY_SYMBOL = "₹"
AVATAR_COLORS = ("#6366f1", "#8b5cf6", "#ec4899", "#f59e0b", "#10b981", "#3b82f6", "#ef4444")
STATUS_BADGES = {
    "Active": "badge badge-active",
    "Inactive": "badge badge-inactive",
}


def initials(name: str) -> str:
    """Up to two uppercase initials."""
    return "".join(part[0] for part in name.split()).upper()[:2]


def avatar_color(name: str) -> str:
    if not name:
        return AVATAR_COLORS[0]
    return AVATAR_COLORS[ord(name[0]) % len(AVATAR_COLORS)]


def status_badge(status: str) -> str:
    """CSS classes of the status badge; anything else is shown as on leave."""
    return STATUS_BADGES.get(status, "badge badge-leave")


def format_salary(amount: Optional[float], symbol: str = CURRENCY_SYMBOL, rounded: bool = False) -> str:
    """"₹50,000" style amount; an em dash when there is nothing to show."""
    if amount is None:
        return "—"
    if rounded or float(amount).is_integer():
        return f"{symbol}{round(amount):,}"
    return f"{symbol}{amount:,.2f}"


def format_joining_date(value: Any) -> str:
    """"15 Jan 2024" style date, or "" when the value is not a date."""
    parsed = parse_date(value)
    if parsed is None:
        return ""
    return parsed.strftime("%d %b %Y")
