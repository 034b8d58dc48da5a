"""Main loop of the simulated plant watering controller."""

from __future__ import annotations

import argparse
import itertools
import random
import time
from collections.abc import Callable, Sequence
from typing import IO, Any

from embedsim.plant_config import LedState, PumpState, SystemConfig
from embedsim.plant_control import (
    handle_user_input,
    read_sensors,
    select_led,
    update_actuators,
    update_watering,
)


def run(
    config: SystemConfig | None = None,
    iterations: int | None = None,
    rng: Any = None,
    infile: IO[str] | None = None,
    out: IO[str] | None = None,
    sleep: Callable[[float], object] | None = None,
) -> tuple[PumpState, LedState]:
    """Run the control cycle ``iterations`` times, or forever if ``None``.

    Each cycle reads the sensors, applies the automatic watering rule,
    takes one user command, updates the actuators and then waits for the
    configured sensor interval. Returns the last pump and LED states.
    """
    if iterations is not None and iterations < 0:
        raise ValueError("iterations must not be negative")
    config = config if config is not None else SystemConfig()
    wait = sleep if sleep is not None else time.sleep
    pump = PumpState.OFF
    led = LedState.NORMAL
    cycles = itertools.count() if iterations is None else range(iterations)
    for _ in cycles:
        data = read_sensors(rng, out)
        pump = update_watering(data, config, pump, out)
        pump = handle_user_input(config, pump, infile, out)
        led = select_led(data, config, pump)
        update_actuators(pump, led, out)
        wait(config.sensor_interval)
    return pump, led


def main(argv: Sequence[str] | None = None) -> int:
    """Run the controller interactively on standard input and output."""
    parser = argparse.ArgumentParser(
        description="Simulate an automatic plant watering system."
    )
    parser.add_argument(
        "--iterations", type=int, default=None, help="stop after this many cycles"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for the simulated sensors"
    )
    args = parser.parse_args(argv)
    if args.iterations is not None and args.iterations < 0:
        parser.error("--iterations must not be negative")
    run(iterations=args.iterations, rng=random.Random(args.seed))
    return 0