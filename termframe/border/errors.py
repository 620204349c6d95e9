"""
Border configuration errors.
"""


class ConfigurationError(Exception):
    """Raised when a border is configured in a way that cannot be drawn."""
    pass
