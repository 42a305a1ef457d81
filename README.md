# tempwatch

A small streaming temperature monitor. It keeps sensor readings in a min-max
heap, which gives quick access to both the coldest and the hottest active
reading. Each reading expires 60 seconds after its own timestamp.

When at least five readings are active, the monitor checks the five hottest
of them after each new reading. A reading above 48 °C is reported as an
*isolated high spike* when the neighbouring sensors (ID − 1 and ID + 1) last
reported 48 °C or less. Sensor 1 has no left neighbour to check and sensor 15
has no right neighbour to check. A sensor that has not reported yet counts as
normal. Each alert is printed to standard output and also written to the
alert log, if one is given.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Running the simulation

```
tempwatch
```

By default this starts fifteen simulated sensor threads. Each thread produces
a reading about every 100 ms. On its 1st, 16th, 31st and later readings in
that pattern, a sensor may inject a high spike (75–85 °C) or a cold spot
(10–25 °C). In between, readings fall in the normal 40–45 °C range. The main
thread takes one queued reading per poll, every 50 ms, and passes it to the
monitor. Alerts go to standard output and to `alert_logging.txt`, which is
overwritten on each run. Press Ctrl+C to stop.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--sensors N` | 15 | number of simulated sensors, with IDs 1..N |
| `--delay SECONDS` | 0.1 | pause between readings of one sensor |
| `--poll SECONDS` | 0.05 | pause between monitor polls |
| `--seed N` | 42 | seed of the shared random generator |
| `--log PATH` | `alert_logging.txt` | file that alerts are written to |
| `--duration SECONDS` | none | stop after this long; without it, the run lasts until interrupted |

## Using the library

```python
from tempwatch.reading import SensorReading
from tempwatch.monitor import TemperatureMonitor

with open("alerts.txt", "w") as log:
    monitor = TemperatureMonitor(alert_log=log)
    alerts = monitor.process_reading(
        SensorReading(sensor_id=3, timestamp=0, temperature=41.5)
    )
    print(alerts)                    # list of alert lines produced by this reading
    print(monitor.active_average())  # mean of active readings, or None
```

`TemperatureMonitor(alert_log=None, clock=None)` takes an optional writable
text stream for alerts and an optional clock. The clock is a callable that
returns the current time in milliseconds; it defaults to wall-clock time.
Expiry is checked against this clock each time a reading is processed.
A sensor ID outside 0–15 raises a `RuntimeWarning`, and that sensor's latest
temperature is not recorded.

`SensorReading(sensor_id, timestamp, temperature)` is a dataclass. Readings
compare by temperature for `<` and `>`, and `describe()` returns a one-line
description of the reading.

### The heap on its own

`tempwatch.minmaxheap.MinMaxHeap` works over a shared list of readings. Its
entries are indices into that list. A second list records where each reading
sits in the heap, with -1 meaning that the reading is absent. The heap keeps
this second list up to date.

```python
from tempwatch.reading import SensorReading
from tempwatch.minmaxheap import MinMaxHeap

readings = [SensorReading(1, 0, t) for t in (42.0, 80.1, 15.3, 44.4)]
positions = [-1] * len(readings)
heap = MinMaxHeap(readings, positions)
for i in range(len(readings)):
    heap.insert(i)

heap.find_min()      # 2, the coldest reading (None when empty)
heap.find_max()      # 1, the hottest reading (None when empty)
heap.top_k_max(2)    # [1, 3], hottest first; the heap is left unchanged
heap.top_k_min(2)    # [2, 0], coldest first
heap.delete_max()    # removes the hottest reading
len(heap), heap.is_empty()
```

`insert` raises `IndexError` for an index outside the positions list. It
issues a `RuntimeWarning` and does nothing when the reading is already in the
heap. `delete_at(slot)` removes the entry at a heap slot and ignores slots
that are out of range.

## What it does not do

The command only runs simulated sensors. Neither the command nor the library
can read real sensor hardware or accept readings over a network.