"""admin-console: operator commands for administrative user accounts."""

__version__ = "0.1.0"
