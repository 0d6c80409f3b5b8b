from enum import Enum
from stringy.exceptions import InvalidBaseError, InvalidCaseError
from stringy.patterns import (
    CASE_CAMEL,
    CASE_KEBAB,
    CASE_PASCAL,
    CASE_SNAKE,
    CASES,
    BASE_BIN,
    BASE_HEX,
    BASES
)

class CaseStyle(str, Enum):
    """
    Enumeration of identifier naming styles used by `stringy.cases.convert_case`.
    """
    CAMEL = CASE_CAMEL
    KEBAB = CASE_KEBAB
    PASCAL = CASE_PASCAL
    SNAKE = CASE_SNAKE

    @classmethod
    def resolve(cls, value) -> "CaseStyle":
        """
        Return the member for an enum member or its string value.

        Raises:
            InvalidCaseError: If the value is not a recognized case style.

        Example:
            >>> CaseStyle.resolve('snake_case')
            <CaseStyle.SNAKE: 'snake_case'>
        """
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidCaseError(value, CASES) from e

class Base(str, Enum):
    """
    Enumeration of string encodings used by `stringy.bases.convert_base`.
    """
    BIN = BASE_BIN
    HEX = BASE_HEX

    @classmethod
    def resolve(cls, value) -> "Base":
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidBaseError(value, BASES) from e

class PadSide(Enum):
    """
    Side(s) of the string that `stringy.wrapper.Stringy.pad` fills.
    """
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"
