"""
  Monkey tokenizer

- Regex driven, lazy: tokens are produced on demand.
- Strings are taken verbatim between double quotes; there is no escape
  processing and an unterminated string runs to the end of the input.
- Anything the grammar does not know becomes an ILLEGAL token; the parser
  reports it.
- Exactly one EOF token terminates the stream; `Lexer.next_token` keeps
  returning EOF once the source is exhausted.
"""

from __future__ import annotations

import re
from typing import Iterator

from monkey.reader.token import Token, TokenType, lookup_ident


TOKEN_RE = re.compile(
    r"\s*(?:"
    r'(?P<string>"[^"]*"?)'  # string, possibly unterminated
    r"|(?P<int>[0-9]+)"  # integer literal
    r"|(?P<ident>[A-Za-z_][A-Za-z0-9_]*)"  # identifiers and keywords
    r"|(?P<two_char>==|!=)"  # two character operators
    r"|(?P<one_char>[=+\-!*/<>,;:(){}\[\]])"  # single character operators/delimiters
    r"|(?P<illegal>\S)"  # fallback
    r")",
    re.DOTALL,
)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Tokens and finishes with a single EOF."""
    pos = 0
    n = len(source)

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None or m.lastgroup is None:
            # only trailing whitespace left
            break
        pos = m.end()
        kind, text = m.lastgroup, m.group(m.lastgroup)

        if kind == "string":
            body = text[1:-1] if len(text) > 1 and text.endswith('"') else text[1:]
            yield Token(TokenType.STRING, body)
        elif kind == "int":
            yield Token(TokenType.INT, text)
        elif kind == "ident":
            yield Token(lookup_ident(text), text)
        elif kind in ("two_char", "one_char"):
            yield Token(text, text)
        else:
            yield Token(TokenType.ILLEGAL, text)

    yield Token(TokenType.EOF, "")


class Lexer:
    """Pull-based wrapper around `lex`; restart by building a new Lexer."""

    def __init__(self, source: str):
        self.source = source
        self._tokens = lex(source)
        self._done = False

    def next_token(self) -> Token:
        if self._done:
            return Token(TokenType.EOF, "")
        tok = next(self._tokens, Token(TokenType.EOF, ""))
        if tok.kind == TokenType.EOF:
            self._done = True
        return tok

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind == TokenType.EOF:
                return
