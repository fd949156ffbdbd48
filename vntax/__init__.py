"""vntax - Vietnamese tax calculators and phone number validation."""

__version__ = "0.1.0"
