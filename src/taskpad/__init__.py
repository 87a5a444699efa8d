"""taskpad - a local task manager with JSON and CSV import/export."""

__version__ = "1.0.0"
