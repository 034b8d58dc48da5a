"""Thresholds, states and records shared by the plant watering controller."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MOISTURE_MIN = 30
MOISTURE_MAX = 70
WATERING_DURATION = 10
SENSOR_CHECK_INTERVAL = 5


class SystemMode(Enum):
    """Whether the pump follows the moisture readings or the user."""

    AUTO = 0
    MANUAL = 1


class PumpState(Enum):
    """Whether the pump is running."""

    OFF = 0
    ON = 1


class LedState(Enum):
    """What the status LED is showing."""

    NORMAL = 0
    WATERING = 1
    LOW_MOISTURE_ALERT = 2
    ERROR = 3


@dataclass
class SensorData:
    """One reading of the soil moisture (percent) and air temperature (°C)."""

    soil_moisture: int = 0
    air_temp: int = 0


@dataclass
class SystemConfig:
    """Controller settings; the mode changes at run time."""

    moisture_min: int = MOISTURE_MIN
    moisture_max: int = MOISTURE_MAX
    watering_duration: int = WATERING_DURATION
    sensor_interval: int = SENSOR_CHECK_INTERVAL
    mode: SystemMode = SystemMode.AUTO