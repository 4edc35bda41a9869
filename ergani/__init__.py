"""Client, models and command line for the Ergani labour-declaration API."""

__version__ = "0.1.0"

__all__ = ["client", "errors", "models", "types", "cli"]