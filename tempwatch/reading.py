"""A single temperature sample reported by a sensor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=True)
class SensorReading:
    """One temperature sample; readings order by temperature alone."""

    sensor_id: int
    timestamp: int
    temperature: float

    def __lt__(self, other: SensorReading) -> bool:
        if not isinstance(other, SensorReading):
            return NotImplemented
        return self.temperature < other.temperature

    def __gt__(self, other: SensorReading) -> bool:
        if not isinstance(other, SensorReading):
            return NotImplemented
        return self.temperature > other.temperature

    def describe(self) -> str:
        """Return a one-line human readable description of the reading."""
        return (
            f"[Sensor {self.sensor_id}] {self.timestamp} ms => "
            f"Temp: {self.temperature:g} C"
        )

    def __str__(self) -> str:
        return self.describe()