import re

import pytest

from slbar.battery import battery_perc, battery_remaining, battery_state


def make_battery(root, name="BAT0", **files):
    bat = root / name
    bat.mkdir(parents=True, exist_ok=True)
    for key, value in files.items():
        (bat / key).write_text(f"{value}\n")
    return str(root)


def test_perc_reads_capacity(tmp_path):
    root = make_battery(tmp_path, capacity=87)
    assert battery_perc("BAT0", root) == "87"


def test_perc_missing_battery(tmp_path):
    assert battery_perc("BAT9", str(tmp_path)) is None


@pytest.mark.parametrize(
    "status, symbol",
    [
        ("Charging", "+"),
        ("Discharging", "-"),
        ("Full", "o"),
        ("Not charging", "o"),
        ("Unknown", "?"),
    ],
)
def test_state_symbols(tmp_path, status, symbol):
    root = make_battery(tmp_path, status=status)
    assert battery_state("BAT0", root) == symbol


def test_state_missing_file(tmp_path):
    root = make_battery(tmp_path, capacity=50)
    assert battery_state("BAT0", root) is None


def test_state_not_letters(tmp_path):
    root = make_battery(tmp_path, status="123")
    assert battery_state("BAT0", root) is None


def test_remaining_when_charging_is_empty(tmp_path):
    root = make_battery(tmp_path, status="Charging", charge_now=3000000)
    assert battery_remaining("BAT0", root) == ""


def test_remaining_when_discharging(tmp_path):
    root = make_battery(
        tmp_path, status="Discharging", charge_now=3000000, current_now=2000000
    )
    assert battery_remaining("BAT0", root) == "1h 30m"


def test_remaining_energy_and_power_match_charge_and_current(tmp_path):
    charge_root = make_battery(
        tmp_path / "a", status="Discharging", charge_now=4200000, current_now=1300000
    )
    energy_root = make_battery(
        tmp_path / "b", status="Discharging", energy_now=4200000, power_now=1300000
    )
    first = battery_remaining("BAT0", charge_root)
    assert first == battery_remaining("BAT0", energy_root)
    assert re.fullmatch(r"\d+h \d+m", first)


def test_remaining_zero_current(tmp_path):
    root = make_battery(
        tmp_path, status="Discharging", charge_now=3000000, current_now=0
    )
    assert battery_remaining("BAT0", root) is None


def test_remaining_without_charge_file(tmp_path):
    root = make_battery(tmp_path, status="Discharging", current_now=1000)
    assert battery_remaining("BAT0", root) is None


def test_remaining_without_current_file(tmp_path):
    root = make_battery(tmp_path, status="Discharging", charge_now=1000)
    assert battery_remaining("BAT0", root) is None


def test_remaining_without_status(tmp_path):
    root = make_battery(tmp_path, charge_now=1000, current_now=1000)
    assert battery_remaining("BAT0", root) is None