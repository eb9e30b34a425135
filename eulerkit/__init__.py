"""Project Euler solutions with prime, factor and decimal big-integer helpers."""

__version__ = "0.1.0"