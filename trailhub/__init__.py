"""Client and data layer for the trail-running events directory API."""

__version__ = "0.1.0"
