"""Gregorian and Chinese calendars over Julian day numbers, with lunar phases and solar terms."""

__version__ = "0.11.0"

__all__ = ["astronomy", "calendar", "chinese", "cli", "date", "gregorian"]