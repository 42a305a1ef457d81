"""Simulated sensor streams feeding a temperature monitor."""

from __future__ import annotations

import argparse
import queue
import random
import threading
import time
from collections.abc import Callable

from tempwatch.monitor import TemperatureMonitor
from tempwatch.reading import SensorReading

NUM_SENSORS = 15
DELAY_SECONDS = 0.1
POLL_SECONDS = 0.05
ANOMALY_EVERY = 15
SEED = 42
ALERT_LOG_PATH = "alert_logging.txt"


def current_timestamp() -> int:
    """Return the wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def generate_reading(
    sensor_id: int,
    count: int,
    rng: random.Random,
    clock: Callable[[], int] = current_timestamp,
) -> SensorReading:
    """Produce the ``count``-th reading of a sensor, injecting anomalies periodically."""
    timestamp = clock()
    temperature = rng.uniform(40.0, 45.0)
    if count % ANOMALY_EVERY == 0:
        r = rng.uniform(0.0, 1.0)
        if r < 0.4:
            temperature = rng.uniform(75.0, 85.0)
        elif r < 0.7:
            temperature = rng.uniform(10.0, 25.0)
    return SensorReading(sensor_id, timestamp, temperature)


def sensor_stream(
    sensor_id: int,
    readings: queue.Queue,
    rng: random.Random,
    stop_event: threading.Event,
    delay: float = DELAY_SECONDS,
) -> None:
    """Put readings from one sensor on the queue until the stop event is set."""
    count = 0
    while not stop_event.is_set():
        readings.put(generate_reading(sensor_id, count, rng))
        count += 1
        stop_event.wait(delay)


def monitor_readings(
    monitor: TemperatureMonitor,
    readings: queue.Queue,
    stop_event: threading.Event,
    poll_interval: float = POLL_SECONDS,
) -> None:
    """Feed queued readings to the monitor, one per poll, until stopped."""
    while not stop_event.is_set():
        try:
            reading = readings.get_nowait()
        except queue.Empty:
            pass
        else:
            monitor.process_reading(reading)
        stop_event.wait(poll_interval)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Simulate temperature sensors and report isolated spikes."
    )
    parser.add_argument("--sensors", type=int, default=NUM_SENSORS)
    parser.add_argument("--delay", type=float, default=DELAY_SECONDS)
    parser.add_argument("--poll", type=float, default=POLL_SECONDS)
    parser.add_argument("--seed", type=int, default=SEED)
    parser.add_argument("--log", default=ALERT_LOG_PATH)
    parser.add_argument(
        "--duration",
        type=float,
        default=None,
        help="seconds to run; runs until interrupted when omitted",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the sensor simulation and monitor."""
    args = _parse_args(argv)
    rng = random.Random(args.seed)
    readings: queue.Queue = queue.Queue()
    stop_event = threading.Event()

    with open(args.log, "w", encoding="utf-8") as log:
        monitor = TemperatureMonitor(alert_log=log)
        threads = [
            threading.Thread(
                target=sensor_stream,
                args=(sensor_id, readings, rng, stop_event, args.delay),
                daemon=True,
            )
            for sensor_id in range(1, args.sensors + 1)
        ]
        for thread in threads:
            thread.start()

        timer = None
        if args.duration is not None:
            timer = threading.Timer(args.duration, stop_event.set)
            timer.daemon = True
            timer.start()
        try:
            monitor_readings(monitor, readings, stop_event, args.poll)
        except KeyboardInterrupt:
            pass
        finally:
            stop_event.set()
            if timer is not None:
                timer.cancel()
            for thread in threads:
                thread.join()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())