from __future__ import annotations
from typing import Iterable, TextIO
import logging

from calc.parser import parse_line
from calc.climber import format_expr, to_sexpr
from calc.errors import ErrorKind

logger = logging.getLogger(__name__)

formatters = {
    'tree': lambda expr: format_expr(expr).rstrip('\n'),
    'sexpr': to_sexpr,
}

def run(lines: Iterable[str], out: TextIO, err: TextIO, fmt='tree', quiet=False) -> int:
    status = 0

    for lineno, line in enumerate(lines, 1):
        line = line.rstrip('\r\n')
        result = parse_line(line)
        if result.ok:
            if not quiet:
                print(f'Parsed: {formatters[fmt](result.tree)}', file=out)
            continue

        print(f'Parse failed: {result.error.describe(line)}', file=err)
        if result.error.kind is ErrorKind.INTERNAL:
            logger.error("Aborting after internal fault on line %d", lineno)
            return 2
        status = 1

    return status
