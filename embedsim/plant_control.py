"""Sensor reading, watering decisions, actuator output and user commands."""

from __future__ import annotations

import random
import sys
from typing import IO, Any

from embedsim.plant_config import (
    LedState,
    PumpState,
    SensorData,
    SystemConfig,
    SystemMode,
)

_LED_COLOURS = {
    LedState.NORMAL: "Green",
    LedState.WATERING: "Yellow",
    LedState.LOW_MOISTURE_ALERT: "Blue",
    LedState.ERROR: "Red",
}


def _output(out: IO[str] | None) -> IO[str]:
    return out if out is not None else sys.stdout


def read_sensors(rng: Any = None, out: IO[str] | None = None) -> SensorData:
    """Simulate a sensor reading: moisture 0-100 %, air 20-34 °C."""
    source = rng if rng is not None else random
    data = SensorData(
        soil_moisture=source.randrange(101),
        air_temp=20 + source.randrange(15),
    )
    print(
        f"[SENSORS] Soil moisture: {data.soil_moisture}%, "
        f"Air temp: {data.air_temp}°C",
        file=_output(out),
    )
    return data


def update_watering(
    data: SensorData,
    config: SystemConfig,
    pump: PumpState,
    out: IO[str] | None = None,
) -> PumpState:
    """Return the pump state the automatic mode asks for.

    In manual mode, or when the moisture is within the thresholds, the
    pump state is returned unchanged.
    """
    if config.mode is not SystemMode.AUTO:
        return pump
    if data.soil_moisture < config.moisture_min:
        print("[WATERING] Pump ON (Auto)", file=_output(out))
        return PumpState.ON
    if data.soil_moisture > config.moisture_max:
        print("[WATERING] Pump OFF (Auto)", file=_output(out))
        return PumpState.OFF
    return pump


def update_actuators(
    pump: PumpState, led: LedState, out: IO[str] | None = None
) -> str:
    """Report the pump and LED state; returns the line written."""
    pump_text = "ON" if pump is PumpState.ON else "OFF"
    line = f"[ACTUATORS] Pump: {pump_text}, LED: {_LED_COLOURS[led]}"
    print(line, file=_output(out))
    return line


def handle_user_input(
    config: SystemConfig,
    pump: PumpState,
    infile: IO[str] | None = None,
    out: IO[str] | None = None,
) -> PumpState:
    """Prompt for one command line and apply its first character.

    ``a`` selects automatic mode, ``m`` selects manual mode and stops the
    pump, and ``w`` starts the pump when in manual mode. The mode is
    changed on ``config``; the resulting pump state is returned.
    """
    stream = _output(out)
    source = infile if infile is not None else sys.stdin
    stream.write(
        "[USER] Press 'a' for AUTO, 'm' for MANUAL, 'w' for manual watering: "
    )
    stream.flush()
    command = source.readline()[:1]
    if command == "a":
        config.mode = SystemMode.AUTO
        print("[USER] Switched to AUTO mode", file=stream)
    elif command == "m":
        config.mode = SystemMode.MANUAL
        pump = PumpState.OFF
        print("[USER] Switched to MANUAL mode", file=stream)
    elif command == "w" and config.mode is SystemMode.MANUAL:
        pump = PumpState.ON
        print("[USER] Manual watering started", file=stream)
    return pump


def select_led(
    data: SensorData, config: SystemConfig, pump: PumpState
) -> LedState:
    """Choose the LED state for the current pump state and reading."""
    if pump is PumpState.ON:
        return LedState.WATERING
    if data.soil_moisture < config.moisture_min:
        return LedState.LOW_MOISTURE_ALERT
    return LedState.NORMAL