# embedsim

Small simulations of embedded-style components, in plain Python with no
third-party dependencies:

- **`embedsim.logger`**: a logger with eight syslog-style severity levels
  (`LogLevel.EMERGENCY` = 0 through `LogLevel.DEBUG` = 7). A message is
  written when its level value is less than or equal to the logger's
  threshold, so a lower threshold lets through only the more severe messages.
  Each line has the form `[YYYY-MM-DD HH:MM:SS] [LEVEL] message`. Lines go to
  standard output, or to a stream you pass in, and are also appended to a log
  file if you give one. `level_name(level)` returns `"UNKNOWN"` for values
  outside the enum.
- **`embedsim.led_strip`**: an in-memory buffer for an RGB LED strip. Each
  pixel is a 24-bit word packed in G, R, B order by `pack_color(r, g, b)`.
  Each channel is masked to 8 bits. Writes to an index outside the strip are
  ignored. A negative pixel count raises `ValueError`.
- **`embedsim.plant_config`**, **`embedsim.plant_control`**,
  **`embedsim.plant_app`**: a simulated plant watering controller. It reads
  random soil moisture and air temperature values, switches the pump in AUTO
  mode, takes mode commands from the user, and reports the pump and status LED
  state as text.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

### Logger

```python
from embedsim.logger import Logger, LogLevel

with Logger("logfile.txt", LogLevel.DEBUG) as log:
    log.log(LogLevel.INFO, "This is an info message.")
    log.set_level(LogLevel.ERROR)
    log.log(LogLevel.DEBUG, "Filtered out.")   # returns None
    log.log(LogLevel.ERROR, "Written.")        # returns the line written
```

`Logger` also takes the keyword arguments `stream=` to send output somewhere
other than standard output, and `clock=` to supply the time used for
timestamps.

### LED strip

```python
from embedsim.led_strip import LedStrip

strip = LedStrip(10)
strip.set_pixel_color(0, 255, 0, 0)
strip.fill(0, 255, 0)
print([f"0x{p:08X}" for p in strip.buffer()])
strip.clear()
print(len(strip))
```

`buffer()` returns a tuple snapshot of the packed words.

### Plant watering

`embedsim.plant_app.run(config, iterations, rng, infile, out, sleep)` runs the
control cycle. Each cycle reads the sensors, applies the automatic watering
rule, reads one command line, picks the LED state, reports the actuators and
waits `config.sensor_interval` seconds. Leave `iterations` as `None` to run
forever. The function returns the last `(PumpState, LedState)`.

Commands, one per cycle (only the first character of the line counts):

- `a` switches to AUTO mode.
- `m` switches to MANUAL mode and stops the pump.
- `w` starts the pump, but only in MANUAL mode.

With the default `SystemConfig`, in AUTO mode the pump starts when the soil
moisture is below 30% and stops when it is above 70%. Between those values it
keeps its previous state. The LED shows Yellow while the pump runs, Blue when
the moisture is below the minimum, and Green otherwise. Sensors are read every
5 seconds.

## Commands

```
embedsim-logger-demo [LOGFILE]                  # logs sample messages; LOGFILE defaults to logfile.txt
embedsim-led-demo                               # sets and fills pixels on a 10-pixel strip, prints the words
embedsim-plant [--iterations N] [--seed SEED]   # runs the interactive watering controller
```

## What this package does not do

Nothing here talks to real hardware. The sensor readings come from a random
number generator. The pump and LED exist only as lines of printed text. The
LED strip is a buffer in memory that is never sent to any device.