"""Reader: tokenizer and parser turning Monkey source text into an AST."""

from monkey.reader.token import Token, TokenType
from monkey.reader.lexer import Lexer, lex
from monkey.reader.parser import Parser, ParseResult, parse

__all__ = ["Token", "TokenType", "Lexer", "lex", "Parser", "ParseResult", "parse"]
