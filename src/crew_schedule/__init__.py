"""crew-schedule: a daily task scheduler with overlap checking."""

__version__ = "0.1.0"
