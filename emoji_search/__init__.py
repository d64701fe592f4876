"""Score and rank emoji records against free-text queries."""

__version__ = "0.1.0"
