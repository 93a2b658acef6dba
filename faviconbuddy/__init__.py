"""Library for embedding website favicons into exported browser bookmark files."""

__version__ = "1.0.0"