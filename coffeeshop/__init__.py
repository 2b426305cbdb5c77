"""Suppliers & coffees: SQLAlchemy table mapping and query composition examples."""

__version__ = "0.1.0"
