"""pgnkit: PGN movetext parsing."""

__version__ = "0.1.0"
