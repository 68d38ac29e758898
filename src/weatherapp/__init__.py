# src/weatherapp/__init__.py
"""pogoda - current weather and 5-day forecast lookup by city name."""

__version__ = "0.1.0"
