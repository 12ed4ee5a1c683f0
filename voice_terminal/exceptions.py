"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class CommandExecutionError(BaseAppError):
    """Exception raised when a child process cannot be spawned or completed."""

    pass


class SessionError(BaseAppError):
    """Exception raised for session store errors."""

    pass
