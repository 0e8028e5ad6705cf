"""CPU frequency and usage components."""

from __future__ import annotations

from .util import fmt_human, read_int, read_text

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"

# user nice system idle iowait irq softirq
_FIELDS = 7
_BUSY = (0, 1, 2, 5, 6)


class CpuUsage:
    """Tracks CPU time counters between samples to report usage in percent."""

    def __init__(self, stat_path: str = PROC_STAT) -> None:
        self.stat_path = stat_path
        self._last: tuple[float, ...] | None = None

    def _read(self) -> tuple[float, ...] | None:
        text = read_text(self.stat_path)
        if text is None:
            return None
        tokens = text.split()[1 : 1 + _FIELDS]
        if len(tokens) != _FIELDS:
            return None
        try:
            return tuple(float(token) for token in tokens)
        except ValueError:
            return None

    def sample(self) -> str | None:
        """Read the counters and return usage since the previous sample."""
        current = self._read()
        if current is None:
            return None
        previous, self._last = self._last, current
        if previous is None or previous[0] == 0:
            return None

        total = sum(current) - sum(previous)
        if total == 0:
            return None
        busy = sum(current[i] for i in _BUSY) - sum(previous[i] for i in _BUSY)
        return str(int(100 * busy / total))


_usage = CpuUsage()


def cpu_freq(path: str = CPU_FREQ) -> str | None:
    """Return the current frequency of the first CPU."""
    khz = read_int(path)
    if khz is None:
        return None
    return fmt_human(khz * 1000, 1000)


def cpu_perc(unused: object = None) -> str | None:
    """Return CPU usage in percent since the previous call."""
    return _usage.sample()