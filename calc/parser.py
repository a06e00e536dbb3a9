from __future__ import annotations
from typing import NamedTuple, Optional
import logging

from calc.grammar import parse_equation
from calc.climber import Expr, build_expr
from calc.errors import ParseFailure, InternalConsistencyFault

logger = logging.getLogger(__name__)

class ParseResult(NamedTuple):
    tree: Optional[Expr]
    error: Optional[ParseFailure]

    @property
    def ok(self) -> bool:
        return self.error is None

def parse(line: str) -> Expr:
    """Parse one line into an expression tree.

    Raises ParseSyntaxError or NumericOverflow for bad input, and
    InternalConsistencyFault if the grammar hands the climber a node it
    cannot place.
    """
    return build_expr(parse_equation(line))

def parse_line(line: str) -> ParseResult:
    try:
        return ParseResult(parse(line), None)
    except InternalConsistencyFault as e:
        logger.exception("Internal consistency fault while parsing %r", line)
        return ParseResult(None, e)
    except ParseFailure as e:
        logger.debug("Rejected %r: %s", line, e)
        return ParseResult(None, e)
