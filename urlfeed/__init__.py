"""urlfeed - turn a single URL into a deduplicated RSS feed item."""

__version__ = "1.0.0"
