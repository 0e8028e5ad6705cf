# slbar

`slbar` builds a one-line status text out of small system readings: date and
time, load average, memory and swap use, disk space, battery state, CPU usage,
network addresses and speeds, Wi-Fi signal, volume and more. It writes that
line to standard output again and again at a fixed interval, which suits status
bars that read their text from a command.

Most readings come from Linux interfaces (`/proc`, `/sys`, ioctls), so the
package is meant for Linux.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Running

```
slbar -s
```

writes the status line to standard output once a second until it is stopped.
Options, which may be combined (`-s1`):

- `-s` write the status to standard output
- `-1` write the status once and exit (implies `-s`)
- `-v` write `slbar-1.0` to standard error and exit with status 1

Any other option or argument writes `usage: slbar [-v] [-s] [-1]` to standard
error and exits with status 1. `--` ends the options.

`SIGINT` and `SIGTERM` stop the loop after the current line has been written.
`SIGUSR1` does not stop it; it wakes the loop up so that the next line is
written at once.

The same entry point can be started as `python -m slbar.cli`.

## What it does not do

`slbar` only writes to standard output. It does not set the name of an X root
window, so running it without `-s` or `-1` fails with
`XOpenDisplay: Failed to open display` and exit status 1. There are no
components for keyboard indicators or the keyboard layout, and the battery,
CPU, memory, swap, temperature, network-speed and Wi-Fi components read the
Linux interfaces only; there is no BSD support apart from `entropy`. Volume is
read through the OSS mixer interface only.

## Components

A component returns a string, or `None` when it cannot read a value; the status
line then shows the unknown text (`n/a` by default) in its place. Failures to
read are reported as a line on standard error.

| module          | functions |
|-----------------|-----------|
| `slbar.files`   | `cat(path)`, `num_files(path)`, `disk_free(path)`, `disk_perc(path)`, `disk_total(path)`, `disk_used(path)` |
| `slbar.system`  | `datetime(fmt)`, `entropy(path=None)`, `hostname()`, `kernel_release()`, `load_avg()`, `uptime()`, `gid()`, `uid()`, `username()`, `temp(file)`, `run_command(cmd)` |
| `slbar.battery` | `battery_perc(bat, root=...)`, `battery_state(bat, root=...)`, `battery_remaining(bat, root=...)` |
| `slbar.cpu`     | `cpu_freq(path=...)`, `cpu_perc()` |
| `slbar.memory`  | `ram_free(path=...)`, `ram_perc(path=...)`, `ram_total(path=...)`, `ram_used(path=...)`, `swap_free(path=...)`, `swap_perc(path=...)`, `swap_total(path=...)`, `swap_used(path=...)` |
| `slbar.network` | `ipv4(interface)`, `ipv6(interface)`, `netspeed_rx(interface)`, `netspeed_tx(interface)`, `wifi_perc(interface, root=..., wireless_path=...)`, `wifi_essid(interface)` |
| `slbar.volume`  | `vol_perc(card="/dev/mixer")` |

Notes on a few of them:

- `cat` and `run_command` return the first line of a file or of a shell
  command's output, without its newline.
- `temp` reads a file holding millidegrees Celsius and returns whole degrees.
- `battery_state` returns `+` (charging), `-` (discharging), `o` (full or not
  charging) or `?`; `battery_remaining` returns e.g. `2h 30m` while
  discharging and an empty string otherwise. Batteries are looked up under
  `/sys/class/power_supply` unless another `root` is given.
- `cpu_perc`, `netspeed_rx` and `netspeed_tx` compare with the previous call, so
  the first call returns `None`. Their state lives in `slbar.cpu.CpuUsage` and
  `slbar.network.NetSpeed`, which can also be used directly.
- `slbar.memory.parse_meminfo` turns a `/proc/meminfo` listing into a mapping of
  field names to kB values, and `slbar.network.parse_wireless_link` reads the
  link quality from a `/proc/net/wireless` listing.
- `slbar.system.format_uptime(seconds)` formats seconds as `Hh Mm`.

Sizes come out in human-readable form through `slbar.util.fmt_human`, for
example `fmt_human(1536, 1024)` gives `"1.5 Ki"`; the base must be 1000 or 1024,
anything else raises `ValueError`.

## Building your own line

A status line is a sequence of `slbar.config.Arg` entries, each naming a
component, a `%s`-style format and the component's argument. When the argument
is `None` the component is called with no argument and uses its own default.

```python
from slbar.config import Arg, render_status
from slbar.system import datetime, load_avg
from slbar.memory import ram_perc

args = [
    Arg(datetime, "%s", " %F %T"),
    Arg(load_avg, " | %s", None),
    Arg(ram_perc, " | mem %s%%", "/proc/meminfo"),
]
print(render_status(args, "n/a", 2048))
```

`render_status` stops, with a warning on standard error, at the first entry
whose text would not fit in the maximum length or whose format is invalid.

The defaults live in `slbar.config`: `ARGS` (a single entry showing the date
and time as `" %F | %l:%M"`), `INTERVAL` (1000 ms), `UNKNOWN_STR` (`"n/a"`) and
`MAXLEN` (2048 bytes).

To keep updating with your own entries, pass them to `slbar.cli.run` together
with options from `slbar.cli.parse_args`:

```python
import sys
from slbar.cli import parse_args, run

run(parse_args(["-s"]), args, sys.stdout)
```

`run` raises `slbar.cli.FatalError` when the options do not ask for standard
output or when writing fails.