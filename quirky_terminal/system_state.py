"""Query the host for the facts shown next to the art."""

from __future__ import annotations

from datetime import datetime
import getpass
import logging
import os
from pathlib import Path
import platform
import re
import socket
import subprocess
import sys
from typing import List, Optional, Sequence, Tuple

import distro
import psutil

from .formatting import UNKNOWN, ThermalState

logger = logging.getLogger(__name__)

IS_MAC = sys.platform == "darwin"
IS_LINUX = sys.platform.startswith("linux")

_RESOLUTION_PATTERN = re.compile(r"(\d+)\s*x\s*(\d+)")


def run_command(args: Sequence[str], timeout: float = 3.0) -> Optional[str]:
    """Run an external diagnostic command and return its stripped stdout.

    Returns ``None`` when the command is missing, times out or exits non-zero.
    Bytes that are not valid UTF-8 are replaced rather than raised.
    """
    try:
        result = subprocess.run(
            list(args),
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("command %s failed: %s", args[0], exc)
        return None
    if result.returncode != 0:
        logger.debug("command %s exited with %d", args[0], result.returncode)
        return None
    return result.stdout.strip()


def _sysctl(name: str) -> Optional[str]:
    return run_command(["sysctl", "-n", name]) if IS_MAC else None


def get_user_and_host() -> str:
    try:
        user = getpass.getuser()
    except (KeyError, OSError) as exc:
        logger.debug("user lookup failed: %s", exc)
        user = os.environ.get("USER", UNKNOWN)
    host = socket.gethostname() or "localhost"
    if host.endswith(".local"):
        host = host[: -len(".local")]
    return f"{user}@{host}"


def get_os_version() -> str:
    if IS_MAC:
        release = platform.mac_ver()[0]
        build = _sysctl("kern.osversion")
        if release and build:
            return f"macOS {release} ({build})"
        if release:
            return f"macOS {release}"
    if IS_LINUX:
        name = distro.name(pretty=True)
        if name:
            return name
    system = platform.system()
    if not system:
        return UNKNOWN
    return f"{system} {platform.release()}".strip()


def get_kernel() -> str:
    return platform.release() or UNKNOWN


def get_boot_time() -> Optional[datetime]:
    try:
        return datetime.fromtimestamp(psutil.boot_time())
    except (psutil.Error, OSError) as exc:
        logger.debug("boot time unavailable: %s", exc)
        return None


def get_uptime_seconds() -> Optional[float]:
    boot = get_boot_time()
    if boot is None:
        return None
    return max(0.0, (datetime.now() - boot).total_seconds())


def get_cpu_brand() -> str:
    if IS_MAC:
        brand = _sysctl("machdep.cpu.brand_string")
        if brand:
            return brand
    if IS_LINUX:
        try:
            with open("/proc/cpuinfo", "r", encoding="utf-8", errors="ignore") as handle:
                for line in handle:
                    if line.lower().startswith(("model name", "hardware")):
                        return line.split(":", 1)[1].strip()
        except OSError as exc:
            logger.debug("/proc/cpuinfo unreadable: %s", exc)
    return platform.processor() or UNKNOWN


def get_total_memory() -> Optional[int]:
    try:
        return psutil.virtual_memory().total
    except (psutil.Error, OSError) as exc:
        logger.debug("memory query failed: %s", exc)
        return None


def get_disk_space(path: Optional[str] = None) -> Optional[Tuple[int, int]]:
    """Return ``(total, free)`` bytes for the filesystem holding ``path`` (home by default)."""
    target = path or str(Path.home())
    try:
        usage = psutil.disk_usage(target)
    except (psutil.Error, OSError) as exc:
        logger.debug("disk usage for %s failed: %s", target, exc)
        return None
    return usage.total, usage.free


def get_battery() -> Tuple[Optional[int], bool]:
    """Return the battery percentage (``None`` without a battery) and whether it is charging."""
    try:
        battery = psutil.sensors_battery()
    except (psutil.Error, OSError, AttributeError) as exc:
        logger.debug("battery query failed: %s", exc)
        return None, False
    if battery is None:
        return None, False
    percent = int(battery.percent)
    charging = bool(battery.power_plugged) and percent < 100
    return percent, charging


def is_low_power_mode() -> bool:
    if IS_MAC:
        output = run_command(["pmset", "-g"]) or ""
        match = re.search(r"lowpowermode\s+(\d+)", output)
        return bool(match and match.group(1) == "1")
    if IS_LINUX:
        try:
            profile = Path("/sys/firmware/acpi/platform_profile").read_text(encoding="utf-8").strip()
        except OSError:
            profile = ""
        if profile == "low-power":
            return True
        return run_command(["powerprofilesctl", "get"], timeout=1.0) == "power-saver"
    return False


def get_thermal_state() -> Optional[ThermalState]:
    """Estimate the thermal pressure of the machine, ``None`` when the platform does not say."""
    if IS_MAC:
        output = run_command(["pmset", "-g", "therm"])
        if output is None:
            return None
        match = re.search(r"CPU_Speed_Limit\s*=\s*(\d+)", output)
        if not match:
            return ThermalState.NOMINAL
        return _thermal_from_speed_limit(int(match.group(1)))
    if IS_LINUX:
        return _thermal_from_sensors()
    return None


def _thermal_from_speed_limit(limit: int) -> ThermalState:
    if limit >= 100:
        return ThermalState.NOMINAL
    if limit >= 80:
        return ThermalState.FAIR
    if limit >= 50:
        return ThermalState.SERIOUS
    return ThermalState.CRITICAL


_SEVERITY: List[ThermalState] = [
    ThermalState.NOMINAL,
    ThermalState.FAIR,
    ThermalState.SERIOUS,
    ThermalState.CRITICAL,
]


def _thermal_from_sensors() -> Optional[ThermalState]:
    try:
        sensors = psutil.sensors_temperatures()
    except (psutil.Error, OSError, AttributeError) as exc:
        logger.debug("temperature sensors unavailable: %s", exc)
        return None
    readings = [reading for entries in sensors.values() for reading in entries]
    if not readings:
        return None
    return max((classify_temperature(r.current, r.high, r.critical) for r in readings), key=_SEVERITY.index)


def classify_temperature(current: float, high: Optional[float], critical: Optional[float]) -> ThermalState:
    """Place a sensor reading relative to its own ``high`` and ``critical`` thresholds."""
    if critical and current >= critical:
        return ThermalState.CRITICAL
    if high and current >= high:
        return ThermalState.SERIOUS
    if high and current >= high - 10:
        return ThermalState.FAIR
    return ThermalState.NOMINAL


def get_core_counts() -> Optional[Tuple[int, int]]:
    """Return ``(active, total)`` logical processor counts."""
    total = psutil.cpu_count() or os.cpu_count()
    if not total:
        return None
    active: Optional[int] = None
    if IS_MAC:
        value = _sysctl("hw.activecpu")
        active = int(value) if value and value.isdigit() else None
    else:
        try:
            active = len(psutil.Process().cpu_affinity())
        except (psutil.Error, OSError, AttributeError) as exc:
            logger.debug("cpu affinity unavailable: %s", exc)
    return (active or total), total


def get_shell() -> str:
    return Path(os.environ.get("SHELL", "")).name or UNKNOWN


def get_terminal() -> str:
    return os.environ.get("TERM_PROGRAM") or os.environ.get("TERM") or UNKNOWN


def get_resolution() -> Optional[Tuple[int, int]]:
    """Return the pixel size of the primary display, ``None`` when there is none."""
    if IS_MAC:
        output = run_command(["system_profiler", "SPDisplaysDataType"], timeout=10.0) or ""
        for line in output.splitlines():
            if "Resolution:" in line:
                return parse_resolution(line)
        return None
    if IS_LINUX and os.environ.get("DISPLAY"):
        output = run_command(["xrandr", "--current"]) or ""
        for line in output.splitlines():
            if "*" in line:
                return parse_resolution(line)
    return None


def parse_resolution(text: str) -> Optional[Tuple[int, int]]:
    match = _RESOLUTION_PATTERN.search(text)
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))
