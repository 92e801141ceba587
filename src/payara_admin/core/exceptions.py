"""Custom exceptions for Payara Admin Client."""

from typing import Optional


class PayaraAdminError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code


class CommandException(PayaraAdminError):
    """Administration command could not be turned into a request."""

    ILLEGAL_NULL_VALUE = "ILLEGAL_NULL_VALUE"
    ILLEGAL_COMMAND_INSTANCE = "ILLEGAL_COMMAND_INSTANCE"


class IllegalNullValue(CommandException):
    """A required command field is missing."""

    def __init__(self, message: str = "Command field value must not be null"):
        super().__init__(message, code=CommandException.ILLEGAL_NULL_VALUE)


class IllegalCommandInstance(CommandException):
    """Command handed to a runner of a different command kind."""

    def __init__(self, message: str = "Illegal command instance for this runner"):
        super().__init__(message, code=CommandException.ILLEGAL_COMMAND_INSTANCE)


class ConfigurationError(PayaraAdminError):
    """Configuration error."""
    pass


class AdminRequestError(PayaraAdminError):
    """Transport failure talking to the administration endpoint."""
    pass
