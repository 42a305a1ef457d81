from tempwatch.reading import SensorReading


def test_describe_format():
    reading = SensorReading(sensor_id=3, timestamp=1000, temperature=42.5)
    assert reading.describe() == "[Sensor 3] 1000 ms => Temp: 42.5 C"


def test_str_matches_describe():
    reading = SensorReading(7, 123456, 80.25)
    assert str(reading) == reading.describe()


def test_ordering_by_temperature_only():
    cold = SensorReading(sensor_id=9, timestamp=1, temperature=10.0)
    hot = SensorReading(sensor_id=1, timestamp=999, temperature=80.0)
    assert cold < hot
    assert hot > cold
    assert not hot < cold


def test_sorting_uses_temperature():
    readings = [
        SensorReading(1, 0, 45.0),
        SensorReading(2, 0, 12.0),
        SensorReading(3, 0, 78.0),
    ]
    assert [r.sensor_id for r in sorted(readings)] == [2, 1, 3]


def test_fields_are_kept():
    reading = SensorReading(4, 55, 41.0)
    assert (reading.sensor_id, reading.timestamp, reading.temperature) == (4, 55, 41.0)