"""Homesync relay broker for ESP32 controllers and mobile companion apps."""

__all__: list[str] = []
