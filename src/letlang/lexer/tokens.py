"""Token types and Token dataclass for the letlang lexer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType


class TokenType(Enum):
    """Every distinct token the letlang lexer can produce."""

    # Literals
    NULL = auto()
    NUMBER = auto()
    IDENTIFIER = auto()

    # Keywords
    LET = auto()

    # Grouping & operators
    EQUALS = auto()             # =
    OPEN_PAREN = auto()
    CLOSE_PAREN = auto()
    BINARY_OPERATOR = auto()    # + - * / %

    # Structure
    END_OF_INPUT = auto()


# Lexeme carried by the END_OF_INPUT token
END_OF_INPUT_LEXEME = "EndOfFile"

# Map keyword strings to token types (read-only)
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "let": TokenType.LET,
    "null": TokenType.NULL,
})


@dataclass(frozen=True, slots=True)
class Token:
    """A single token produced by the lexer.

    ``value`` is the exact source text that was matched, except for the
    END_OF_INPUT token, which carries a fixed sentinel string.
    """

    type: TokenType
    value: str

    @classmethod
    def end_of_input(cls) -> Token:
        return cls(TokenType.END_OF_INPUT, END_OF_INPUT_LEXEME)

    def __repr__(self) -> str:
        if self.type is TokenType.END_OF_INPUT:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r})"
