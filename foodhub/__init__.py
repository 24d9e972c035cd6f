"""FoodHub restaurant website service."""

__version__ = "0.1.0"
