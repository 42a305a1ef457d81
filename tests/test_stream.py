import queue
import random
import threading
import time

from tempwatch.monitor import TemperatureMonitor
from tempwatch.reading import SensorReading
from tempwatch.stream import (
    ANOMALY_EVERY,
    current_timestamp,
    generate_reading,
    main,
    monitor_readings,
    sensor_stream,
)


def fixed_clock():
    return 777


class _StoppingQueue(queue.Queue):
    """Queue that signals an event once it holds a given number of items."""

    def __init__(self, stop_event, limit):
        super().__init__()
        self._stop_event = stop_event
        self._limit = limit

    def put(self, item, block=True, timeout=None):
        super().put(item, block, timeout)
        if self.qsize() >= self._limit:
            self._stop_event.set()


def test_current_timestamp_close_to_wall_clock():
    before = int(time.time() * 1000)
    stamp = current_timestamp()
    after = int(time.time() * 1000)
    assert before - 1 <= stamp <= after + 1


def test_normal_reading_in_normal_range():
    rng = random.Random(1)
    for count in range(1, ANOMALY_EVERY):
        reading = generate_reading(4, count, rng, fixed_clock)
        assert reading.sensor_id == 4
        assert reading.timestamp == 777
        assert 40.0 <= reading.temperature <= 45.0


def test_anomaly_slot_ranges():
    kinds = set()
    for seed in range(200):
        temp = generate_reading(2, 0, random.Random(seed), fixed_clock).temperature
        if 75.0 <= temp <= 85.0:
            kinds.add("spike")
        elif 10.0 <= temp <= 25.0:
            kinds.add("cold")
        else:
            assert 40.0 <= temp <= 45.0
            kinds.add("normal")
    assert kinds == {"spike", "cold", "normal"}


def test_generation_is_deterministic():
    first = [generate_reading(1, c, random.Random(42), fixed_clock) for c in range(20)]
    second = [generate_reading(1, c, random.Random(42), fixed_clock) for c in range(20)]
    assert first == second


def test_sensor_stream_produces_until_stopped():
    stop = threading.Event()
    readings = _StoppingQueue(stop, 3)
    sensor_stream(9, readings, random.Random(0), stop, 0.001)
    assert stop.is_set()
    items = []
    while not readings.empty():
        items.append(readings.get_nowait())
    assert len(items) == 3
    assert all(item.sensor_id == 9 for item in items)


def test_sensor_stream_stopped_before_start_produces_nothing():
    readings = queue.Queue()
    stop = threading.Event()
    stop.set()
    sensor_stream(1, readings, random.Random(0), stop, 0.001)
    assert readings.empty()


def test_monitor_readings_drains_queue():
    monitor = TemperatureMonitor(clock=lambda: 0)
    readings = queue.Queue()
    for sensor in range(1, 4):
        readings.put(SensorReading(sensor, 0, 41.0))
    stop = threading.Event()
    thread = threading.Thread(
        target=monitor_readings, args=(monitor, readings, stop, 0.001)
    )
    thread.start()
    deadline = time.monotonic() + 5
    while monitor.active_count < 3 and time.monotonic() < deadline:
        time.sleep(0.005)
    stop.set()
    thread.join(timeout=5)
    assert monitor.active_count == 3
    assert readings.empty()


def test_main_runs_for_duration(tmp_path):
    log_path = tmp_path / "alerts.txt"
    result = main(
        [
            "--sensors", "3",
            "--delay", "0.01",
            "--poll", "0.001",
            "--duration", "0.3",
            "--log", str(log_path),
        ]
    )
    assert result == 0
    assert log_path.exists()
    for line in log_path.read_text(encoding="utf-8").splitlines():
        assert line.startswith("[ALERT]")