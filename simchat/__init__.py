"""Chat-driven control surface for a real-time simulation front-end."""

__version__ = "0.1.0"
