"""Personal command reference: named shell snippets kept in a JSON file."""

__version__ = "0.3.0"
