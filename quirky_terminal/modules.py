"""Group system facts into the labelled items shown beside the art."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol, Sequence

from . import system_state
from .formatting import (
    UNKNOWN,
    Style,
    colorize,
    describe_thermal_state,
    format_battery,
    format_core_usage,
    format_disk,
    format_last_boot,
    format_low_power,
    format_memory,
    format_resolution,
    format_uptime,
)

HEADER_KEY = "Header"


@dataclass(frozen=True)
class InfoItem:
    key: str
    value: str

    @property
    def is_header(self) -> bool:
        return self.key == HEADER_KEY


class SystemModule(Protocol):
    def fetch(self) -> Sequence[InfoItem]:
        ...


class UserHostModule:
    """The ``user@host`` banner."""

    def fetch(self) -> List[InfoItem]:
        return [InfoItem(HEADER_KEY, colorize(system_state.get_user_and_host(), Style.GREEN))]


class SoftwareModule:
    def fetch(self) -> List[InfoItem]:
        uptime = system_state.get_uptime_seconds()
        boot = system_state.get_boot_time()
        return [
            InfoItem("OS", system_state.get_os_version()),
            InfoItem("Kernel", system_state.get_kernel()),
            InfoItem("Uptime", format_uptime(uptime) if uptime is not None else UNKNOWN),
            InfoItem("Last Boot", format_last_boot(boot) if boot is not None else UNKNOWN),
        ]


class HardwareModule:
    def fetch(self) -> List[InfoItem]:
        memory = system_state.get_total_memory()
        disk = system_state.get_disk_space()
        percent, charging = system_state.get_battery()
        cores = system_state.get_core_counts()
        return [
            InfoItem("CPU", system_state.get_cpu_brand()),
            InfoItem("Memory", format_memory(memory) if memory is not None else UNKNOWN),
            InfoItem("Disk Space", format_disk(*disk) if disk else UNKNOWN),
            InfoItem("Battery", format_battery(percent, charging)),
            InfoItem("Low Power Mode", format_low_power(system_state.is_low_power_mode())),
            InfoItem("Thermal State", describe_thermal_state(system_state.get_thermal_state())),
            InfoItem("Processor Usage", format_core_usage(*cores) if cores else UNKNOWN),
        ]


class EnvironmentModule:
    def fetch(self) -> List[InfoItem]:
        width, height = system_state.get_resolution() or (None, None)
        return [
            InfoItem("Shell", system_state.get_shell()),
            InfoItem("Terminal", system_state.get_terminal()),
            InfoItem("Resolution", format_resolution(width, height)),
        ]


def default_modules() -> List[SystemModule]:
    """Modules in the order they are listed on screen."""
    return [UserHostModule(), EnvironmentModule(), SoftwareModule(), HardwareModule()]
