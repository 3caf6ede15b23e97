"""tokman -- design token extraction, normalization and conflict resolution."""

__version__ = "0.3.0"
