"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ArgumentParseError(BaseAppError):
    """Exception raised when the command line cannot be parsed."""

    pass


class ExecutionError(BaseAppError):
    """Exception raised when the target shell cannot be run."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
