"""Exceptions for muttindex line rewriting."""

from dataclasses import dataclass


class RewriteError(Exception):
    """Base exception for all rewriting errors."""

    pass


@dataclass
class UsageError(RewriteError):
    """The program was invoked incorrectly.

    Raised when the caller passes zero or more than one index line.
    """

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class ConfigurationError(RewriteError):
    """An alternates file could not be loaded or has the wrong shape."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class PatternMismatchError(RewriteError):
    """Input line does not match the expected index format.

    Attributes:
        message: Description of the error.
        line: The line that failed to match.
        variant: Name of the pattern variant that was tried.
    """

    message: str
    line: str
    variant: str

    def __str__(self) -> str:
        return f"{self.message} (variant: {self.variant})"


@dataclass
class FieldMissingError(RewriteError):
    """A capture group was absent after a successful match.

    This indicates a bug in the pattern definitions, not bad input.
    """

    message: str
    group: str

    def __str__(self) -> str:
        return f"{self.message} (group: {self.group})"
