"""Console-friendly formatting utilities."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
import re
from typing import List, Optional, Union

GIB = 1024**3
UNKNOWN = "Unknown"
NOT_AVAILABLE = "N/A"
NO_BATTERY = "N/A (Desktop?)"
THERMAL_FALLBACK = "Unknown (needs an update)"

_ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


class Style(str, Enum):
    RESET = "\x1b[0m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"
    WHITE = "\x1b[37m"
    BOLD = "\x1b[1m"


PALETTE = (Style.RED, Style.GREEN, Style.YELLOW, Style.BLUE, Style.MAGENTA, Style.CYAN)


class ThermalState(str, Enum):
    NOMINAL = "nominal"
    FAIR = "fair"
    SERIOUS = "serious"
    CRITICAL = "critical"


_THERMAL_LABELS = {
    ThermalState.NOMINAL: "Nominal",
    ThermalState.FAIR: "Fair",
    ThermalState.SERIOUS: "Serious",
    ThermalState.CRITICAL: "Critical",
}


def colorize(text: str, style: Style) -> str:
    return f"{style.value}{text}{Style.RESET.value}"


def strip_ansi(text: str) -> str:
    return _ANSI_PATTERN.sub("", text)


def format_uptime(seconds: float) -> str:
    """Render an uptime as ``"1d, 2h, 3m"``, leaving out parts that are zero."""
    total = int(seconds)
    days, remainder = divmod(total, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes = remainder // 60

    parts: List[str] = []
    if days > 0:
        parts.append(f"{days}d")
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    return ", ".join(parts) if parts else "< 1m"


def format_relative_time(moment: datetime, now: datetime) -> str:
    """Describe ``moment`` relative to ``now``, e.g. ``"3 days ago"``."""
    delta = (now - moment).total_seconds()
    future = delta < 0
    delta = abs(delta)
    units = (
        ("year", 365 * 86400),
        ("month", 30 * 86400),
        ("week", 7 * 86400),
        ("day", 86400),
        ("hour", 3600),
        ("minute", 60),
    )
    for name, size in units:
        if delta >= size:
            count = int(delta // size)
            phrase = f"{count} {name}{'s' if count != 1 else ''}"
            return f"in {phrase}" if future else f"{phrase} ago"
    return "just now"


def format_last_boot(boot_time: datetime, now: Optional[datetime] = None) -> str:
    return "Booted " + format_relative_time(boot_time, now or datetime.now())


def format_memory(total_bytes: int) -> str:
    return f"{total_bytes / GIB:.2f} GB"


def format_disk(total_bytes: int, free_bytes: int) -> str:
    used_gb = (total_bytes - free_bytes) // 1024 // 1024 // 1024
    total_gb = total_bytes // 1024 // 1024 // 1024
    return f"{used_gb}GB / {total_gb}GB"


def format_battery(percent: Optional[float], charging: bool = False) -> str:
    if percent is None:
        return NO_BATTERY
    status = " (Charging)" if charging else ""
    return f"{int(percent)}%{status}"


def format_low_power(enabled: bool) -> str:
    return "Saving Energy 🔋" if enabled else "Full Send ⚡️"


def describe_thermal_state(state: Union[ThermalState, str, None]) -> str:
    """Map a thermal state to its display label.

    ``None`` means the platform exposes no thermal information at all; any
    value outside the known states gets the explicit fallback label.
    """
    if state is None:
        return UNKNOWN
    try:
        return _THERMAL_LABELS[ThermalState(state)]
    except ValueError:
        return THERMAL_FALLBACK


def format_core_usage(active: int, total: int) -> str:
    return f"{active} / {total}"


def format_resolution(width: Optional[int], height: Optional[int]) -> str:
    if not width or not height:
        return NOT_AVAILABLE
    return f"{width}x{height}"
