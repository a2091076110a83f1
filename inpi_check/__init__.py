"""Trademark availability checks against the Brazilian INPI register."""

__version__ = "0.1.0"
