"""Customer and order search over commerce indexes."""

__version__ = "0.1.0"
