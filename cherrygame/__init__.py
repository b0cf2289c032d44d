"""Building blocks for game servers: codes, errors, encoders, maps, file and HTTP helpers."""

__version__ = "1.3.18"