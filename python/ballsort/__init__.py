"""Level generation, validation and play rules for a ball sort puzzle."""

__version__ = "0.1.0"
