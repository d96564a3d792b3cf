"""letlang lexer: hand-written single-pass tokenizer.

Design decisions:
- Operators and punctuation are always one character (no ``==`` or ``**``).
- Numbers and words are scanned by maximal munch; a word becomes a keyword
  only after the whole alphabetic run has been read.
- Whitespace is skipped one character at a time and never tokenized.
- Any other character aborts the whole scan; there is no error token.
"""

from __future__ import annotations

from letlang.lexer.tokens import KEYWORDS, Token, TokenType

SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOSE_PAREN,
    "+": TokenType.BINARY_OPERATOR,
    "-": TokenType.BINARY_OPERATOR,
    "*": TokenType.BINARY_OPERATOR,
    "/": TokenType.BINARY_OPERATOR,
    "%": TokenType.BINARY_OPERATOR,
    "=": TokenType.EQUALS,
}

DIGITS = frozenset("0123456789")

# str.isspace() accepts these separators; they are not Unicode White_Space
NON_WHITESPACE_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


class LexerError(Exception):
    """Raised on lexical errors with the cursor offset."""

    def __init__(self, message: str, offset: int):
        self.offset = offset
        super().__init__(f"{message} (at offset {offset})")


class UnrecognizedCharacterError(LexerError):
    """Raised when the cursor sits on a character no token can start with."""

    def __init__(self, character: str, offset: int):
        self.character = character
        super().__init__(
            f"Unrecognized character found in source code: {character!r}",
            offset,
        )


class Lexer:
    """Tokenizes letlang source code into a list of `Token` objects.

    Usage::

        lexer = Lexer("let x = 45 * (4 / 3)")
        tokens = lexer.tokenize()
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0
        self.tokens: list[Token] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source and return the token list."""
        self.tokens = []
        self.pos = 0

        while not self._at_end():
            self._scan_token()

        self.tokens.append(Token.end_of_input())
        return self.tokens

    # ------------------------------------------------------------------
    # Token scanning
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Scan a single token (or skip one whitespace character)."""
        ch = self._peek()

        if ch in SINGLE_CHAR_TOKENS:
            self.tokens.append(Token(SINGLE_CHAR_TOKENS[ch], ch))
            self._advance()
            return

        if ch in DIGITS:
            self._scan_number()
            return

        if ch.isalpha():
            self._scan_word()
            return

        if ch.isspace() and ch not in NON_WHITESPACE_SEPARATORS:
            self._advance()
            return

        raise UnrecognizedCharacterError(ch, self.pos)

    def _scan_number(self) -> None:
        """Scan an unsigned integer literal."""
        chars: list[str] = []

        while not self._at_end() and self._peek() in DIGITS:
            chars.append(self._advance())

        self.tokens.append(Token(TokenType.NUMBER, "".join(chars)))

    def _scan_word(self) -> None:
        """Scan an identifier or keyword. Digits end the word."""
        chars: list[str] = []

        while not self._at_end() and self._peek().isalpha():
            chars.append(self._advance())

        word = "".join(chars)
        token_type = KEYWORDS.get(word, TokenType.IDENTIFIER)
        self.tokens.append(Token(token_type, word))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _peek(self) -> str:
        """Return the current character without consuming it."""
        return self.source[self.pos]

    def _advance(self) -> str:
        """Consume and return the current character."""
        ch = self.source[self.pos]
        self.pos += 1
        return ch

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)


def tokenize(source: str) -> list[Token]:
    """Tokenize *source* with a fresh `Lexer`."""
    return Lexer(source).tokenize()
