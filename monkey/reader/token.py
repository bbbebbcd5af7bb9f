from __future__ import annotations

from typing import NamedTuple


class TokenType:
    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    IDENT = "IDENT"
    INT = "INT"
    STRING = "STRING"

    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"

    LT = "<"
    GT = ">"
    EQ = "=="
    NOT_EQ = "!="

    COMMA = ","
    SEMICOLON = ";"
    COLON = ":"

    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"

    LET = "let"
    FUNCTION = "fn"
    MACRO = "macro"
    IF = "if"
    ELSE = "else"
    RETURN = "return"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"


KEYWORDS: dict[str, str] = {
    "fn": TokenType.FUNCTION,
    "macro": TokenType.MACRO,
    "let": TokenType.LET,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "null": TokenType.NULL,
}


class Token(NamedTuple):
    kind: str
    literal: str

    def __str__(self) -> str:
        return self.literal


def lookup_ident(ident: str) -> str:
    """Keyword kind for `ident`, or IDENT."""
    return KEYWORDS.get(ident, TokenType.IDENT)
