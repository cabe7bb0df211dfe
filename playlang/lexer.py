"""Lexer for PlayLang.

The lexer works one character at a time over a :class:`CharStream`, which
tracks line and column numbers for diagnostics. :class:`Tokenizer` classifies
the character stream into :class:`Token` instances and offers a single token of
lookahead. Whitespace, ``//`` line comments and ``/* ... */`` block comments are
skipped. The only keyword is ``function``; every other run of letters, digits
and underscores is an identifier.

Two token sources are provided for the parser:

- :class:`Tokenizer` streams tokens with ``peek()``/``next()`` and cannot rewind.
- :class:`TokenBuffer` wraps an already tokenized list and adds ``position()``
  and ``rewind()`` so that the parser can backtrack.

Lexical problems (unterminated strings or block comments, unrecognized
characters) are reported as diagnostics and never stop tokenization.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import string
from dataclasses import dataclass, field
from enum import Enum

from playlang.diagnostics import Diagnostics


KEYWORDS = frozenset({"function"})
SEPARATORS = frozenset("(){},;")
WHITESPACE = frozenset(" \t\n")

LETTERS = frozenset(string.ascii_letters)
DIGITS = frozenset(string.digits)
IDENT_CHARS = LETTERS | DIGITS | {"_"}

# Operator characters and the second characters that form compound operators.
COMPOUND_OPERATORS = {
    "+": ("+", "="),
    "-": ("-", "="),
    "*": ("=",),
    "/": ("=",),
}


class TokenKind(str, Enum):
    """
    Enumeration of token kinds.
    """
    KEYWORD = "Keyword"
    IDENTIFIER = "Identifier"
    STRING_LITERAL = "StringLiteral"
    SEPARATOR = "Separator"
    OPERATOR = "Operator"
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token with a kind and its literal text.

    The line and column are kept for diagnostics only and are ignored when
    comparing tokens.
    """
    kind: TokenKind
    text: str
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def is_separator(self, text: str) -> bool:
        """
        Check whether this token is the separator ``text``.
        """
        return self.kind is TokenKind.SEPARATOR and self.text == text

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.kind.value}, {self.text!r}, line={self.line}, col={self.column})"


class CharStream:
    """
    Character cursor over the source text.
    """
    def __init__(self, data: str):
        self.data = data
        self.pos = 0
        self.line = 1
        self.column = 0

    def peek(self) -> str:
        """
        Return the current character without consuming it, or ``""`` at the end.
        """
        if self.pos < len(self.data):
            return self.data[self.pos]
        return ""

    def advance(self) -> str:
        """
        Consume and return the current character, updating line and column.
        """
        ch = self.peek()
        if ch == "":
            return ch
        self.pos += 1
        if ch == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += 1
        return ch

    def at_end(self) -> bool:
        """
        Check whether the input is exhausted.
        """
        return self.pos >= len(self.data)


class Tokenizer:
    """
    Streaming tokenizer with a single token of lookahead.
    """
    def __init__(self, stream: CharStream, diagnostics: Diagnostics | None = None):
        """
        Initialize the tokenizer.

        Parameters:
            stream (CharStream): The characters to tokenize.
            diagnostics (Diagnostics): Sink for lexical problems.
        """
        self.stream = stream
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self._lookahead: Token | None = None

    def peek(self) -> Token:
        """
        Return the lookahead token without consuming it.
        """
        if self._lookahead is None:
            self._lookahead = self._scan()
        return self._lookahead

    def next(self) -> Token:
        """
        Consume the lookahead token and refill the buffer.
        """
        token = self.peek()
        self._lookahead = self._scan()
        return token

    def _scan(self) -> Token:
        """
        Read one token from the character stream.
        """
        stream = self.stream
        while True:
            self._skip_whitespace()
            line, column = stream.line, stream.column
            if stream.at_end():
                return Token(TokenKind.EOF, "", line, column)

            ch = stream.peek()
            if ch in LETTERS or ch in DIGITS:
                return self._scan_identifier()
            if ch == '"':
                return self._scan_string_literal()
            if ch in SEPARATORS:
                stream.advance()
                return Token(TokenKind.SEPARATOR, ch, line, column)
            if ch in COMPOUND_OPERATORS:
                stream.advance()
                follow = stream.peek()
                if ch == "/" and follow == "*":
                    self._skip_block_comment()
                    continue
                if ch == "/" and follow == "/":
                    self._skip_line_comment()
                    continue
                if follow != "" and follow in COMPOUND_OPERATORS[ch]:
                    stream.advance()
                    return Token(TokenKind.OPERATOR, ch + follow, line, column)
                return Token(TokenKind.OPERATOR, ch, line, column)

            self.diagnostics.report(f"Unrecognized character {ch!r}", line, column)
            stream.advance()

    def _scan_identifier(self) -> Token:
        """
        Read an identifier, or the keyword when the text is reserved.
        """
        stream = self.stream
        line, column = stream.line, stream.column
        text = stream.advance()
        while not stream.at_end() and stream.peek() in IDENT_CHARS:
            text += stream.advance()
        kind = TokenKind.KEYWORD if text in KEYWORDS else TokenKind.IDENTIFIER
        return Token(kind, text, line, column)

    def _scan_string_literal(self) -> Token:
        """
        Read a raw string literal; a missing closing quote is reported and the
        end of input closes the literal.
        """
        stream = self.stream
        line, column = stream.line, stream.column
        stream.advance()
        text = ""
        while not stream.at_end() and stream.peek() != '"':
            text += stream.advance()
        if stream.peek() == '"':
            stream.advance()
        else:
            self.diagnostics.report('Expecting a closing \'"\'', stream.line, stream.column)
        return Token(TokenKind.STRING_LITERAL, text, line, column)

    def _skip_block_comment(self) -> None:
        """
        Skip a block comment after its opening '/', reporting a missing '*/'.
        """
        stream = self.stream
        stream.advance()  # '*'
        prev = ""
        while not stream.at_end():
            ch = stream.advance()
            if prev == "*" and ch == "/":
                return
            prev = ch
        self.diagnostics.report("Failed to find a closing '*/'", stream.line, stream.column)

    def _skip_line_comment(self) -> None:
        """
        Skip a line comment up to, but not including, the newline.
        """
        stream = self.stream
        while not stream.at_end() and stream.peek() != "\n":
            stream.advance()

    def _skip_whitespace(self) -> None:
        """
        Skip spaces, tabs and newlines.
        """
        stream = self.stream
        while not stream.at_end() and stream.peek() in WHITESPACE:
            stream.advance()


class TokenBuffer:
    """
    Array-backed token source that supports marking and rewinding.
    """
    def __init__(self, tokens: list[Token]):
        """
        Initialize the buffer.

        Parameters:
            tokens (list[Token]): Tokens to read. An EOF token is appended if
                the list does not already end with one.
        """
        self.tokens = list(tokens)
        if not self.tokens or self.tokens[-1].kind is not TokenKind.EOF:
            line = self.tokens[-1].line if self.tokens else 1
            self.tokens.append(Token(TokenKind.EOF, "", line))
        self.index = 0

    def peek(self) -> Token:
        """
        Return the current token without consuming it.
        """
        return self.tokens[self.index]

    def next(self) -> Token:
        """
        Consume and return the current token. The trailing EOF is never passed.
        """
        token = self.tokens[self.index]
        if self.index < len(self.tokens) - 1:
            self.index += 1
        return token

    def position(self) -> int:
        """
        Return the current index, usable as a mark for :meth:`rewind`.
        """
        return self.index

    def rewind(self, mark: int) -> None:
        """
        Reset the current index to a previously captured mark.
        """
        if not 0 <= mark < len(self.tokens):
            raise IndexError(f"Invalid token mark {mark}")
        self.index = mark


def tokenize(code: str, diagnostics: Diagnostics | None = None) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        diagnostics (Diagnostics): Sink for lexical problems.

    Returns:
        list[Token]: The tokens, ending with a single EOF token.
    """
    tokenizer = Tokenizer(CharStream(code), diagnostics)
    tokens = []
    while True:
        token = tokenizer.next()
        tokens.append(token)
        if token.kind is TokenKind.EOF:
            return tokens
