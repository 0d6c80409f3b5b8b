"""Errors raised by stringy.

Every error carries a numeric `code` matching the historical exception codes, so
callers that dispatched on codes keep working.
"""

__docformat__ = 'google'

__all__ = [
    'StringyError',
    'InvalidBaseError',
    'SameBaseError',
    'InvalidCaseError',
    'SameCaseError',
    'MalformedHexError',
    'OperationFailedError'
]

from typing import Iterable

class StringyError(Exception):
    """Base error for stringy"""
    code: int = 0

    def __init__(self, message: str = None, source: Exception = None):
        self.message = message
        self.source = source
        super().__init__(self.__str__())

    def __str__(self):
        msg = self.message or self.__class__.__name__
        if self.source:
            return f"{msg}: {self.source}"
        return msg

class InvalidBaseError(StringyError, ValueError):
    """Raised when a base is not one of `stringy.patterns.BASES`."""
    code = 1

    def __init__(self, value, allowed: Iterable[str], source: Exception = None):
        self.value = value
        self.allowed = list(allowed)
        super().__init__(f"Invalid base {value}! Use one of {', '.join(self.allowed)}.", source)

class SameBaseError(StringyError, ValueError):
    """Raised when a base conversion would convert a base to itself."""
    code = 2

    def __init__(self, value, source: Exception = None):
        self.value = value
        super().__init__(f"Invalid base conversion! Base {value} can't be converted to itself.", source)

class InvalidCaseError(StringyError, ValueError):
    """Raised when a case style is not one of `stringy.patterns.CASES`."""
    code = 3

    def __init__(self, value, allowed: Iterable[str], source: Exception = None):
        self.value = value
        self.allowed = list(allowed)
        super().__init__(f"Invalid case {value}! Use one of {', '.join(self.allowed)}.", source)

class SameCaseError(StringyError, ValueError):
    """Raised when a case conversion would convert a style to itself."""
    code = 4

    def __init__(self, value, source: Exception = None):
        self.value = value
        super().__init__(f"Invalid case conversion! Case {value} can't be converted to itself.", source)

class MalformedHexError(StringyError, ValueError):
    """Raised when hexadecimal input has odd length or contains non-hex characters."""
    code = 5

    def __init__(self, value, source: Exception = None):
        self.value = value
        super().__init__(f"Malformed hexadecimal input {value!r}!", source)

class OperationFailedError(StringyError):
    """Raised instead of returning a sentinel when a delegated operation has no result."""
    code = 6

    def __init__(self, operation: str, source: Exception = None):
        self.operation = operation
        super().__init__(f"Operation {operation} failed!", source)
