"""Parking lot administration: in-memory accounts, lot rates and custom vehicle rates."""

__version__ = "0.1.0"
__all__ = ["__version__"]