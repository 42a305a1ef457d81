"""Sliding-window temperature monitor that flags isolated high spikes."""

from __future__ import annotations

import heapq
import time
import warnings
from collections.abc import Callable
from typing import TextIO

from tempwatch.minmaxheap import MinMaxHeap
from tempwatch.reading import SensorReading

MAX_SENSORS_PLUS_ONE = 16
READING_EXPIRATION_MS = 60_000
ANOMALY_CHECK_K = 5
HIGH_TEMP_THRESHOLD = 48.0
MAX_SENSOR_ID = 15
MIN_SENSOR_ID = 1


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class TemperatureMonitor:
    """Keeps readings from the last minute and reports isolated hot sensors.

    Every reading stays active until ``READING_EXPIRATION_MS`` after its own
    timestamp. Once at least ``ANOMALY_CHECK_K`` readings are active, the
    hottest of them are checked; a reading above ``HIGH_TEMP_THRESHOLD`` whose
    neighbouring sensors last reported normal temperatures raises an alert.
    """

    def __init__(
        self,
        alert_log: TextIO | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self.alert_log = alert_log
        self.clock = clock if clock is not None else _now_ms
        self.readings: list[SensorReading] = []
        self.positions: list[int] = []
        self.heap = MinMaxHeap(self.readings, self.positions)
        self._expirations: list[tuple[int, int]] = []
        self.active_sum = 0.0
        self.active_count = 0
        self.latest_temperatures = [0.0] * MAX_SENSORS_PLUS_ONE
        self.latest_timestamps = [0] * MAX_SENSORS_PLUS_ONE

    def _expire(self, now: int) -> None:
        while self._expirations and self._expirations[0][0] <= now:
            _, reading_index = heapq.heappop(self._expirations)
            slot = self.positions[reading_index]
            if slot != -1:
                self.heap.delete_at(slot)
                self.active_sum -= self.readings[reading_index].temperature
                self.active_count -= 1

    def _neighbour_normal(self, neighbour_id: int) -> bool:
        if 0 <= neighbour_id < len(self.latest_temperatures):
            return self.latest_temperatures[neighbour_id] <= HIGH_TEMP_THRESHOLD
        return True

    def _record_latest(self, reading: SensorReading) -> None:
        sensor_id = reading.sensor_id
        if 0 <= sensor_id < MAX_SENSORS_PLUS_ONE:
            self.latest_temperatures[sensor_id] = reading.temperature
            self.latest_timestamps[sensor_id] = reading.timestamp
        else:
            warnings.warn(
                f"sensor ID {sensor_id} is out of expected range "
                f"[0-{MAX_SENSORS_PLUS_ONE - 1}]",
                RuntimeWarning,
                stacklevel=3,
            )

    def process_reading(self, reading: SensorReading) -> list[str]:
        """Add a reading, expire old ones and return any alerts it produced.

        Alerts are also printed and, when an alert log is set, written to it.
        """
        now = self.clock()
        self._expire(now)

        self.readings.append(reading)
        new_index = len(self.readings) - 1
        self.positions.append(-1)
        self.heap.insert(new_index)
        heapq.heappush(
            self._expirations, (reading.timestamp + READING_EXPIRATION_MS, new_index)
        )
        self.active_sum += reading.temperature
        self.active_count += 1
        self._record_latest(reading)

        if len(self.heap) < ANOMALY_CHECK_K:
            return []

        alerts: list[str] = []
        for hot_index in self.heap.top_k_max(ANOMALY_CHECK_K):
            hot = self.readings[hot_index]
            if hot.temperature <= HIGH_TEMP_THRESHOLD:
                continue
            sensor_id = hot.sensor_id
            left_normal = sensor_id <= MIN_SENSOR_ID or self._neighbour_normal(
                sensor_id - 1
            )
            right_normal = sensor_id >= MAX_SENSOR_ID or self._neighbour_normal(
                sensor_id + 1
            )
            if left_normal and right_normal:
                message = (
                    f"[ALERT] Time: {now} | Sensor: {sensor_id} | "
                    f"Type: Isolated High Spike | Temp: {hot.temperature:f} C"
                    " [Note] Neighboring sensors are normal."
                )
                print(message)
                if self.alert_log is not None:
                    self.alert_log.write(message + "\n")
                    self.alert_log.flush()
                alerts.append(message)
        return alerts

    def active_average(self) -> float | None:
        """Return the mean temperature of active readings, or None if there are none."""
        if self.active_count == 0:
            return None
        return self.active_sum / self.active_count