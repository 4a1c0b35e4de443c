"""Domain model builder for colony-simulation save files."""

__version__ = "0.1.0"
