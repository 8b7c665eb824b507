"""
Core Exceptions for the Money Management Engine.

The engine itself never raises on numeric input; these cover bad
configuration and unavailable account sources.
"""


class MoneyManagementError(Exception):
    """Base exception for all money management errors."""
    pass


class ConfigurationError(MoneyManagementError):
    """Invalid configuration."""
    pass


class LevelTableError(ConfigurationError):
    """Level table violates ordering or value constraints."""

    def __init__(self, message: str, level: int = None):
        super().__init__(message)
        self.level = level


class ConnectionError(MoneyManagementError):
    """MT5 connection failed."""
    pass


class AccountUnavailable(MoneyManagementError):
    """Terminal returned no account information."""
    pass
