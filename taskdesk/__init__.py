"""A terminal task manager with due dates, tags and priorities, stored in CSV."""

__version__ = "0.1.0"