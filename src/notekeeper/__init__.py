"""
NoteKeeper Backend - Personal Note Taking API

Authenticated note storage with search, date filtering, sorting,
pagination and favorites.

Version: 1.0.0
"""

__version__ = "1.0.0"
