"""modprep - scaffold a new mod project from the ModTemplate tree."""

__version__ = "1.0.0"
