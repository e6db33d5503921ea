"""Live MVG departures for a selected station with home and work quick access."""

__version__ = "0.1.0"
