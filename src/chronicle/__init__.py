"""Chronicle: backend core for a historical-video platform."""

__version__ = "0.1.0"
