"""Status line built from small system readings, written at a fixed interval."""

__version__ = "1.0.0"