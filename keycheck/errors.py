#
# Imports
#

# Standard library
from typing import Any, Optional

#
# Base Error
#


class KeyCheckError(Exception):
    """
    Base exception for every failure the key check pipeline reports.

    Each subclass carries a fixed default message describing the failed rule.
    The message can be enriched with the offending path and a detail string,
    and the underlying exception is attached with `raise ... from err`.

    str(error) renders a single line: "<message>[ (<path>)][: <detail or cause>]"
    """

    default_message = "key check failed"

    def __init__(
        self,
        message: Optional[str] = None,
        path: Optional[str] = None,
        detail: Optional[str] = None,
        **context: Any,
    ):
        self.message = message or self.default_message
        self.path = str(path) if path is not None else None
        self.detail = detail
        self.context = context
        super().__init__(self.message)

    def __str__(self) -> str:
        text = self.message
        if self.path is not None:
            text = f"{text} ({self.path})"

        # Prefer an explicit detail, fall back to the chained cause
        reason = self.detail
        if reason is None and self.__cause__ is not None:
            reason = str(self.__cause__) or type(self.__cause__).__name__
        if reason:
            text = f"{text}: {reason}"

        # Keep the report on a single line
        return " ".join(text.splitlines())

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "path": self.path,
            "detail": self.detail,
            "cause": str(self.__cause__) if self.__cause__ is not None else None,
            "context": self.context,
        }


#
# Usage
#


class UsageError(KeyCheckError):
    """Fewer than two input files were supplied."""

    default_message = "provide at least two files"


#
# Extension check
#


class ExtensionError(KeyCheckError):
    """A path does not end with an allowed extension."""

    default_message = "file name must end with .json or .arb"


#
# Existence check
#


class ExistenceError(KeyCheckError):
    """Filesystem existence or type check failed."""

    default_message = "file existence check failed"


class ProbeFailedError(ExistenceError):
    """The filesystem could not tell whether the path exists."""

    default_message = "file permission related issue"


class NotFoundError(ExistenceError):
    default_message = "file does not exist"


class NotAFileError(ExistenceError):
    default_message = "given path is not a file"


#
# Parsing
#


class ParseError(KeyCheckError):
    """A file could not be turned into a flat string map."""

    default_message = "could not parse file"


class OpenFailedError(ParseError):
    default_message = "could not open file"


class DecodeFailedError(ParseError):
    default_message = "could not read json or arb file"


#
# Key count check
#


class LengthError(KeyCheckError):
    """Key count precondition violated."""

    default_message = "key count check failed"


class LengthNoInputError(LengthError):
    default_message = "no first item"


class EmptyFileError(LengthError):
    default_message = "file is empty"


class LengthMismatchError(LengthError):
    default_message = "files does not have the same key-value pair"


#
# Key set check
#


class EqualityError(KeyCheckError):
    """Key sets differ across files."""

    default_message = "key set check failed"


class EqualityNoInputError(EqualityError):
    default_message = "could not get first item"


class KeySetMismatchError(EqualityError):
    default_message = "files does not have the same keys"
