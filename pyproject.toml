[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "embedsim"
version = "0.1.0"
description = "Simulated embedded components: a levelled logger, an RGB LED strip buffer and a plant watering controller"
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "simulation", "logger", "led-strip", "watering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
embedsim-logger-demo = "embedsim.logger_demo:main"
embedsim-led-demo = "embedsim.led_demo:main"
embedsim-plant = "embedsim.plant_app:main"

[tool.hatch.build.targets.wheel]
packages = ["embedsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
