from __future__ import annotations
from typing import List
import logging

from calc.utils import Token, TokenId, Rule, Pair, tokenize, look
from calc.errors import ParseSyntaxError, NestingTooDeep

logger = logging.getLogger(__name__)

# Grammar (precedence is left to the climber):
# equation    = expr, EOI ;
# expr        = primary, { operator, primary } ;
# primary     = integer | unary_minus | "(", expr, ")" ;
# unary_minus = "-", primary ;
# operator    = "+" | "-" | "*" | "/" | "%" ;
# integer     = digit, { digit } ;
# digit       = ? regex [0-9] ? ;

op_rules = {
    TokenId.OP_PLUS: Rule.ADD,
    TokenId.OP_MINUS: Rule.SUBTRACT,
    TokenId.OP_MUL: Rule.MULTIPLY,
    TokenId.OP_DIV: Rule.DIVIDE,
    TokenId.OP_MOD: Rule.MODULO,
}

atom_expected = ('integer', 'unary_minus', '(')
op_expected = ('+', '-', '*', '/', '%')

# Unary minus and parentheses each open one level
max_nesting = 100

def describe_token(tok: Token) -> str:
    if tok.token_id is TokenId.EOI:
        return 'end of input'
    return repr(tok.value)

def match(tokens: List[Token], token_id: TokenId, expected) -> Token:
    if look(tokens) is not token_id:
        raise ParseSyntaxError(tokens[0].offset, expected, describe_token(tokens[0]))
    return tokens.pop(0)

def end_of(pair: Pair) -> int:
    return pair.offset + len(pair.text)

def primary(tokens: List[Token], src: str, depth=0) -> Pair:
    tok = tokens[0]

    if depth >= max_nesting and tok.token_id in (TokenId.OP_MINUS, TokenId.RBRACE_LEFT):
        raise NestingTooDeep(max_nesting, tok.offset)

    if tok.token_id is TokenId.NUMBER:
        tokens.pop(0)
        return Pair(Rule.INTEGER, tok.value, tok.offset)
    elif tok.token_id is TokenId.OP_MINUS:
        tokens.pop(0)
        operand = primary(tokens, src, depth + 1)
        return Pair(Rule.UNARY_MINUS, src[tok.offset:end_of(operand)], tok.offset, [operand])
    elif tok.token_id is TokenId.RBRACE_LEFT:
        tokens.pop(0)
        inner = expression(tokens, src, depth + 1)
        close = match(tokens, TokenId.RBRACE_RIGHT, op_expected + (')',))
        return Pair(Rule.EXPR, src[tok.offset:close.offset + 1], tok.offset, inner)

    raise ParseSyntaxError(tok.offset, atom_expected, describe_token(tok))

def expression(tokens: List[Token], src: str, depth=0) -> List[Pair]:
    seq = [primary(tokens, src, depth)]
    while look(tokens) in op_rules:
        op = tokens.pop(0)
        seq.append(Pair(op_rules[op.token_id], op.value, op.offset))
        seq.append(primary(tokens, src, depth))
    return seq

def parse_equation(src: str) -> List[Pair]:
    tokens = tokenize(src)
    logger.debug("Tokens: %s", tokens)
    seq = expression(tokens, src)
    match(tokens, TokenId.EOI, op_expected + ('end of input',))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Syntax nodes:\n%s", "".join(str(pair) for pair in seq))
    return seq
