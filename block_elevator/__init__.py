"""Vertical block elevators: sneak to drop, jump to rise between matching pads."""

__version__ = "0.1.0"
