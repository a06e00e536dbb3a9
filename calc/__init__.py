from calc.parser import parse, parse_line, ParseResult
from calc.climber import Expr, Integer, UnaryMinus, BinOp, Op
from calc.errors import (ErrorKind, ParseFailure, ParseSyntaxError,
                         NumericOverflow, NestingTooDeep, InternalConsistencyFault)
