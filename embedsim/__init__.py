"""Simulated embedded components: logger, LED strip buffer and plant watering controller."""

__version__ = "0.1.0"
__all__ = [
    "logger",
    "logger_demo",
    "led_strip",
    "led_demo",
    "plant_config",
    "plant_control",
    "plant_app",
]