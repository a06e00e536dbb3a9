from __future__ import annotations
from enum import Enum, auto
from typing import Tuple

class ErrorKind(Enum):
    SYNTAX = auto()
    OVERFLOW = auto()
    INTERNAL = auto()

class ParseFailure(Exception):
    kind: ErrorKind = None

    def __init__(self, message: str, offset: int|None = None) -> None:
        super().__init__(message)
        self.message = message
        self.offset = offset

    def __str__(self) -> str:
        if self.offset is None:
            return self.message
        return f'{self.message} at offset {self.offset}'

    def describe(self, src: str) -> str:
        """Render the failure with a caret under the offending column."""
        if self.offset is None:
            return str(self)
        pad = "".join(c if c == "\t" else " " for c in src[:self.offset])
        return f"{str(self)}\n  {src}\n  {pad}^"

class ParseSyntaxError(ParseFailure):
    kind = ErrorKind.SYNTAX

    def __init__(self, offset: int, expected: Tuple[str, ...], found: str) -> None:
        self.expected = tuple(expected)
        self.found = found
        super().__init__(f'expected {", ".join(self.expected)}, found {found}', offset)

class NestingTooDeep(ParseFailure):
    kind = ErrorKind.SYNTAX

    def __init__(self, limit: int, offset: int) -> None:
        self.limit = limit
        super().__init__(f"expression nested deeper than {limit} levels", offset)

class NumericOverflow(ParseFailure):
    kind = ErrorKind.OVERFLOW

    def __init__(self, literal: str, offset: int) -> None:
        self.literal = literal
        super().__init__(f'integer literal {literal} does not fit in 32 bits', offset)

class InternalConsistencyFault(ParseFailure):
    # Raised when the climber meets a node the grammar can never produce
    kind = ErrorKind.INTERNAL
