"""
Mood Logger - a command-line utility for keeping a personal mood log.

This package records a numeric mood rating, with an optional note and
timestamp, as a row in a local SQLite database.
"""

__version__ = "0.1.0"
