from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, List, Tuple, Union
import logging

from calc.utils import Rule, Pair
from calc.errors import NumericOverflow, InternalConsistencyFault

logger = logging.getLogger(__name__)

INT_MIN = -2**31
INT_MAX = 2**31 - 1

class Assoc(Enum):
    LEFT = auto()
    RIGHT = auto()

@dataclass(frozen=True)
class Operator:
    rule: Rule
    assoc: Assoc = Assoc.LEFT

class PrecClimber:
    """Table driven precedence climbing.

    `tiers` lists groups of operators from loosest to tightest binding. A
    single routine handles every tier: after an operator of tier t, the right
    operand is climbed with a minimum tier of t + 1 (or t for right
    associative operators), so tighter runs end up beneath it.
    """

    def __init__(self, tiers: List[List[Operator]]) -> None:
        self.ops: Dict[Rule, Tuple[int, Assoc]] = {}
        for tier, operators in enumerate(tiers):
            for op in operators:
                self.ops[op.rule] = (tier, op.assoc)

    def climb(self, pairs: List[Pair], primary: Callable, infix: Callable):
        if not pairs:
            raise InternalConsistencyFault("Expected atom, found empty sequence")
        lhs, pos = self._climb(pairs, 0, 0, primary, infix)
        if pos != len(pairs):
            raise InternalConsistencyFault(f"Expected infix operator, found {pairs[pos].rule}")
        return lhs

    def _climb(self, pairs, pos, min_tier, primary, infix):
        lhs = primary(pairs[pos])
        pos += 1

        while pos < len(pairs):
            op = pairs[pos]
            if op.rule not in self.ops:
                raise InternalConsistencyFault(f"Expected infix operator, found {op.rule}", op.offset)
            tier, assoc = self.ops[op.rule]
            if tier < min_tier:
                break
            if pos + 1 >= len(pairs):
                raise InternalConsistencyFault(f"Expected atom after {op.rule}, found nothing", op.offset)
            next_min = tier + 1 if assoc is Assoc.LEFT else tier
            rhs, pos = self._climb(pairs, pos + 1, next_min, primary, infix)
            lhs = infix(lhs, op, rhs)

        return lhs, pos

PREC_CLIMBER = PrecClimber([
    [Operator(Rule.ADD), Operator(Rule.SUBTRACT)],
    [Operator(Rule.MULTIPLY), Operator(Rule.DIVIDE), Operator(Rule.MODULO)],
])

class Op(Enum):
    ADD = auto()
    SUBTRACT = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    MODULO = auto()

op_map = {
    Rule.ADD: Op.ADD,
    Rule.SUBTRACT: Op.SUBTRACT,
    Rule.MULTIPLY: Op.MULTIPLY,
    Rule.DIVIDE: Op.DIVIDE,
    Rule.MODULO: Op.MODULO,
}

op_symbols = {
    Op.ADD: '+',
    Op.SUBTRACT: '-',
    Op.MULTIPLY: '*',
    Op.DIVIDE: '/',
    Op.MODULO: '%',
}

@dataclass(frozen=True)
class Integer:
    value: int

@dataclass(frozen=True)
class UnaryMinus:
    inner: Expr

@dataclass(frozen=True)
class BinOp:
    lhs: Expr
    op: Op
    rhs: Expr

Expr = Union[Integer, UnaryMinus, BinOp]

def parse_integer(pair: Pair) -> Integer:
    # INT_MAX has 10 digits; longer literals must not reach int()
    digits = pair.text.lstrip('0') or '0'
    if len(digits) > len(str(INT_MAX)):
        raise NumericOverflow(pair.text, pair.offset)
    try:
        value = int(digits)
    except ValueError:
        raise InternalConsistencyFault(f"Malformed integer literal {pair.text!r}", pair.offset)
    if not INT_MIN <= value <= INT_MAX:
        raise NumericOverflow(pair.text, pair.offset)
    return Integer(value)

def build_atom(pair: Pair) -> Expr:
    if pair.rule is Rule.INTEGER:
        return parse_integer(pair)
    elif pair.rule is Rule.EXPR: # Expression in parentheses
        return build_expr(pair.inner)
    elif pair.rule is Rule.UNARY_MINUS:
        return UnaryMinus(build_expr(pair.inner))
    raise InternalConsistencyFault(f"Expected atom, found {pair.rule}", pair.offset)

def build_binop(lhs: Expr, op: Pair, rhs: Expr) -> BinOp:
    if op.rule not in op_map:
        raise InternalConsistencyFault(f"Expected infix operation, found {op.rule}", op.offset)
    return BinOp(lhs, op_map[op.rule], rhs)

def build_expr(pairs: List[Pair], climber: PrecClimber = PREC_CLIMBER) -> Expr:
    tree = climber.climb(pairs, build_atom, build_binop)
    logger.debug("Built %s from %d pairs", type(tree).__name__, len(pairs))
    return tree

def format_expr(expr: Expr) -> str:
    # Explicit stack: left-assoc chains make trees as deep as the line is long
    ret = ""
    stack = [(expr, 0)]
    while stack:
        node, level = stack.pop()
        indent = "\t" * level
        if isinstance(node, Integer):
            ret += f"{indent}Integer({node.value})\n"
        elif isinstance(node, UnaryMinus):
            ret += f"{indent}UnaryMinus\n"
            stack.append((node.inner, level + 1))
        elif isinstance(node, BinOp):
            ret += f"{indent}BinOp({node.op.name.capitalize()})\n"
            stack.append((node.rhs, level + 1))
            stack.append((node.lhs, level + 1))
        else:
            raise TypeError(f"Not an expression: {node!r}")
    return ret

def to_sexpr(expr: Expr) -> str:
    parts = []
    stack = [expr]
    while stack:
        node = stack.pop()
        if isinstance(node, str):
            parts.append(node)
        elif isinstance(node, Integer):
            parts.append(str(node.value))
        elif isinstance(node, UnaryMinus):
            stack += [")", node.inner, "(neg "]
        elif isinstance(node, BinOp):
            stack += [")", node.rhs, " ", node.lhs, f"({op_symbols[node.op]} "]
        else:
            raise TypeError(f"Not an expression: {node!r}")
    return "".join(parts)
