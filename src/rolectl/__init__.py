"""rolectl - role and permission management."""

__version__ = "0.1.0"
