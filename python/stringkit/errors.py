"""Exceptions raised by stringkit."""


class StringKitError(Exception):
    """Base class for all stringkit errors."""


class ConfigurationError(StringKitError, ValueError):
    """Configuration is missing, unreadable or malformed."""


class InvalidArgument(StringKitError, ValueError):
    """An argument is outside the domain an operation accepts."""


class BindingResolutionError(StringKitError, KeyError):
    """A name was requested from a container that has no binding for it."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
