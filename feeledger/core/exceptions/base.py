"""
Base exception classes for the feeledger system.
"""


class FeeLedgerError(Exception):
    """Base exception for all feeledger errors."""
    pass


class ValidationError(FeeLedgerError):
    """Base exception for validation errors."""

    def __init__(self, field: str, value: str = None, message: str = None):
        self.field = field
        self.value = value
        error_msg = f"Validation error for field '{field}'"
        if value:
            error_msg += f" with value '{value}'"
        if message:
            error_msg += f": {message}"
        super().__init__(error_msg)


class ConfigurationError(FeeLedgerError):
    """Base exception for configuration errors."""

    def __init__(self, config_key: str = None, config_value: str = None, reason: str = None):
        self.config_key = config_key
        self.config_value = config_value
        self.reason = reason
        message = "Configuration error"
        if config_key:
            message += f" for '{config_key}'"
        if config_value:
            message += f" with value '{config_value}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
