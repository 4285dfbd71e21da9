"""Human-readable formatting of uptimes and costs."""

from __future__ import annotations

from .errors import InvalidInputError


def _check_seconds(seconds: int) -> None:
    if seconds < 0:
        raise InvalidInputError(f"Seconds cannot be negative: {seconds}")


def format_uptime(seconds: int) -> str:
    """Format a duration in seconds as e.g. '1d 2h 3m', '2h 3m' or '3m'."""
    _check_seconds(seconds)
    days, rest = divmod(seconds, 86400)
    hours, rest = divmod(rest, 3600)
    mins = rest // 60
    if days > 0:
        return f"{days}d {hours}h {mins}m"
    if hours > 0:
        return f"{hours}h {mins}m"
    return f"{mins}m"


def calculate_cost_spent(uptime_seconds: int, price_per_hour: float) -> float:
    """Cost of running for the given seconds at an hourly price."""
    _check_seconds(uptime_seconds)
    return uptime_seconds / 3600.0 * price_per_hour


def format_cost(uptime_seconds: int, price_per_hour: float) -> str:
    """Cost spent as a dollar amount with two decimals."""
    return f"${calculate_cost_spent(uptime_seconds, price_per_hour):.2f}"