import datetime

from utils.helpers import format_datetime, format_distance, format_mass, format_period, format_temperature


def test_format_datetime():
    assert format_datetime(datetime.datetime(2024, 3, 1, 9, 5, 7)) == "2024-03-01 09:05:07"
    assert format_datetime(None) is None


def test_format_mass():
    assert format_mass(5.9724e24) == "5.97 × 10²⁴ kg"
    assert format_mass(6.4171e23) == "6.42e+23 kg"


def test_format_distance():
    assert format_distance(4495100000) == "4.50 bilhões km"
    assert format_distance(149600000) == "149.60 milhões km"
    assert format_distance(384400) == "384.400 km"


def test_format_temperature():
    assert format_temperature(15.0) == "15°C"
    assert format_temperature(-65.5) == "-65.5°C"


def test_format_period():
    assert format_period(88) == "88.0 dias terrestres"
    assert format_period(4333) == "11.9 anos terrestres"
