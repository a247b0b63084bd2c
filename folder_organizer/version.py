"""Version information for folder-organizer."""

__version__ = "1.0.0"
