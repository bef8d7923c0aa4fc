"""Chess rules engine and computer opponent for the arcade collection."""

__version__ = "1.0.0"
