import io

import pytest

from embedsim.plant_app import main, run
from embedsim.plant_config import (
    SENSOR_CHECK_INTERVAL,
    LedState,
    PumpState,
    SystemConfig,
    SystemMode,
)


class FixedRng:
    def __init__(self, *values):
        self._values = list(values)

    def randrange(self, stop):
        value = self._values.pop(0)
        assert 0 <= value < stop
        return value


def _run(rng_values, commands, iterations, config=None):
    out = io.StringIO()
    sleeps = []
    result = run(
        config=config if config is not None else SystemConfig(),
        iterations=iterations,
        rng=FixedRng(*rng_values),
        infile=io.StringIO(commands),
        out=out,
        sleep=sleeps.append,
    )
    return result, out.getvalue(), sleeps


def test_dry_soil_starts_watering():
    result, text, sleeps = _run([10, 0], "\n", 1)
    assert result == (PumpState.ON, LedState.WATERING)
    assert "[WATERING] Pump ON (Auto)" in text
    assert "[ACTUATORS] Pump: ON, LED: Yellow" in text
    assert sleeps == [SENSOR_CHECK_INTERVAL]


def test_switch_to_manual_stops_pump():
    cfg = SystemConfig()
    result, text, sleeps = _run([10, 0, 50, 0], "\nm\n", 2, cfg)
    assert cfg.mode is SystemMode.MANUAL
    assert result == (PumpState.OFF, LedState.NORMAL)
    assert text.count("[ACTUATORS]") == 2
    assert len(sleeps) == 2


def test_dry_soil_in_manual_mode_alerts():
    cfg = SystemConfig(mode=SystemMode.MANUAL)
    result, text, _ = _run([5, 0], "\n", 1, cfg)
    assert result == (PumpState.OFF, LedState.LOW_MOISTURE_ALERT)
    assert "LED: Blue" in text


def test_manual_watering_command():
    cfg = SystemConfig(mode=SystemMode.MANUAL)
    result, _, _ = _run([50, 0], "w\n", 1, cfg)
    assert result == (PumpState.ON, LedState.WATERING)


def test_sleep_uses_configured_interval():
    cfg = SystemConfig(sensor_interval=2)
    _, _, sleeps = _run([50, 0, 50, 0, 50, 0], "", 3, cfg)
    assert sleeps == [2, 2, 2]


def test_zero_iterations_does_nothing():
    result, text, sleeps = _run([], "", 0)
    assert result == (PumpState.OFF, LedState.NORMAL)
    assert text == ""
    assert sleeps == []


def test_negative_iterations_rejected():
    with pytest.raises(ValueError):
        run(iterations=-1, sleep=lambda _: None)


def test_main_runs_requested_cycles(monkeypatch, capsys):
    sleeps = []
    monkeypatch.setattr("sys.stdin", io.StringIO("a\nm\n"))
    monkeypatch.setattr("time.sleep", sleeps.append)
    assert main(["--iterations", "2", "--seed", "3"]) == 0
    captured = capsys.readouterr().out
    assert captured.count("[SENSORS]") == 2
    assert captured.count("[ACTUATORS]") == 2
    assert "[USER] Switched to MANUAL mode" in captured
    assert sleeps == [SENSOR_CHECK_INTERVAL, SENSOR_CHECK_INTERVAL]


def test_main_rejects_negative_iterations():
    with pytest.raises(SystemExit) as excinfo:
        main(["--iterations", "-1"])
    assert excinfo.value.code == 2