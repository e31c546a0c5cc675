"""Study assistant retrieval core — chunking and keyword ranking."""

__version__ = "0.1.0"
