from __future__ import annotations
from enum import Enum, auto
from typing import List
import re

class TokenId(Enum):
    NUMBER = auto()
    OP_PLUS = auto()
    OP_MINUS = auto()
    OP_MUL = auto()
    OP_DIV = auto()
    OP_MOD = auto()
    RBRACE_LEFT = auto()
    RBRACE_RIGHT = auto()

    # Special tokens, generated by the tokenizer itself
    UNKNOWN = auto()
    EOI = auto()

class Token:
    def __init__(self, token_id: TokenId, value=None, offset: int = 0) -> None:
        self.token_id = token_id
        self.value = value
        self.offset = offset

    def __repr__(self) -> str:
        return f'Token({self.token_id}, {self.value}, {self.offset})'

class Rule(Enum):
    INTEGER = auto()
    UNARY_MINUS = auto()
    EXPR = auto()
    ADD = auto()
    SUBTRACT = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    MODULO = auto()

class Pair:
    """A syntax node: the rule that matched, its text span, and for groups
    the nested sequence of pairs."""

    def __init__(self, rule: Rule, text: str, offset: int, inner: List[Pair] = None):
        self.rule = rule
        self.text = text
        self.offset = offset
        self.inner = inner if inner is not None else []

    def __repr__(self) -> str:
        return f'Pair({self.rule}, {self.text!r}, {self.offset})'

    def __str__(self, level=0) -> str:
        ret = "\t" * level + repr(self) + "\n"

        for child in self.inner:
            ret += child.__str__(level + 1)
        return ret

    def __eq__(self, other) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return (self.rule, self.text, self.offset, self.inner) == \
               (other.rule, other.text, other.offset, other.inner)

_token_map = {
    r'\s+': None,
    r'[0-9]+': TokenId.NUMBER,
    r'\(': TokenId.RBRACE_LEFT,
    r'\)': TokenId.RBRACE_RIGHT,
    r'\+': TokenId.OP_PLUS,
    r'-': TokenId.OP_MINUS,
    r'\*': TokenId.OP_MUL,
    r'/': TokenId.OP_DIV,
    r'%': TokenId.OP_MOD,
}

def tokenize(src: str, token_map=_token_map) -> List[Token]:
    parts = []
    pos = 0
    while pos < len(src):
        for pattern in token_map:
            if (m := re.compile(pattern).match(src, pos)):
                if token_map[pattern]:
                    parts.append(Token(token_map[pattern], m[0], pos))
                pos = m.end()
                break
        else:
            # Let the grammar decide what should have been here
            parts.append(Token(TokenId.UNKNOWN, src[pos], pos))
            pos += 1
    parts.append(Token(TokenId.EOI, '', len(src)))
    return parts

def look(tokens: List[Token]) -> TokenId|None:
    return tokens[0].token_id if tokens else None
