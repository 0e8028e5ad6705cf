"""Battery components backed by the Linux power-supply class in sysfs."""

from __future__ import annotations

import os
import re

from .util import read_int, read_text

POWER_SUPPLY_ROOT = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}

# The state is read as at most 12 letters and spaces.
_STATE = re.compile(r"[a-zA-Z ]{1,12}")


def _path(root: str, bat: str, name: str) -> str:
    return os.path.join(root, bat, name)


def _pick(root: str, bat: str, first: str, second: str) -> str | None:
    for name in (first, second):
        path = _path(root, bat, name)
        if os.access(path, os.R_OK):
            return path
    return None


def _read_state(root: str, bat: str) -> str | None:
    text = read_text(_path(root, bat, "status"))
    if text is None:
        return None
    match = _STATE.match(text)
    return None if match is None else match.group(0)


def battery_perc(bat: str, root: str = POWER_SUPPLY_ROOT) -> str | None:
    """Return the battery capacity in percent."""
    capacity = read_int(_path(root, bat, "capacity"))
    return None if capacity is None else str(capacity)


def battery_state(bat: str, root: str = POWER_SUPPLY_ROOT) -> str | None:
    """Return '+' when charging, '-' when discharging, 'o' when full, else '?'."""
    state = _read_state(root, bat)
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str, root: str = POWER_SUPPLY_ROOT) -> str | None:
    """Return the time left while discharging as hours and minutes, else ''."""
    state = _read_state(root, bat)
    if state is None:
        return None

    charge_path = _pick(root, bat, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = read_int(charge_path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    current_path = _pick(root, bat, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = read_int(current_path)
    if not current_now:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"