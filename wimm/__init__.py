"""Track tasks and the time spent on them, stored in a SQLite file."""

__version__ = "0.1.0"