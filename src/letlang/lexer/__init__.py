"""letlang lexer: single-pass, maximal-munch tokenizer."""

from letlang.lexer.tokens import KEYWORDS, Token, TokenType
from letlang.lexer.lexer import Lexer, LexerError, UnrecognizedCharacterError, tokenize

__all__ = [
    "KEYWORDS",
    "Token",
    "TokenType",
    "Lexer",
    "LexerError",
    "UnrecognizedCharacterError",
    "tokenize",
]
