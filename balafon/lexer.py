"""Tokenizer for balafon scripts, driven by the automaton in `transitions`."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum

from balafon.transitions import START_STATE, next_state


class TokenType(IntEnum):
    """Kinds of tokens produced by the lexer.

    The numeric order of the property kinds is the order in which note
    properties are printed.
    """

    INVALID = 0
    EOF = 1
    TERMINATOR = 3
    CMD_BAR = 4
    CMD_END = 5
    BRACKET_BEGIN = 6
    BRACKET_END = 7
    SYMBOL = 8
    PAUSE = 9
    PROP_SHARP = 10
    PROP_FLAT = 11
    PROP_STACCATO = 12
    PROP_ACCENT = 13
    PROP_MARCATO = 14
    PROP_GHOST = 15
    UINT = 16
    PROP_DOT = 17
    PROP_TUPLET = 18
    PROP_LET_RING = 19
    CMD_ASSIGN = 20
    CMD_PLAY = 21
    CMD_TEMPO = 22
    CMD_KEY = 23
    CMD_TIME = 24
    CMD_VELOCITY = 25
    CMD_CHANNEL = 26
    CMD_VOICE = 27
    CMD_PROGRAM = 28
    CMD_CONTROL = 29
    CMD_START = 30
    CMD_STOP = 31
    BLOCK_COMMENT = 32


@dataclass(frozen=True)
class Pos:
    """Position of a token: byte offset, 1-based line and column, optional source name."""

    offset: int = 0
    line: int = 1
    column: int = 1
    source: str | None = None


@dataclass(frozen=True)
class Token:
    """A lexed token."""

    type: TokenType
    lit: str
    pos: Pos


_ACCEPT: dict[int, TokenType] = {
    2: TokenType.TERMINATOR,
    3: TokenType.PROP_SHARP,
    4: TokenType.PROP_FLAT,
    5: TokenType.PROP_GHOST,
    6: TokenType.PROP_LET_RING,
    7: TokenType.PAUSE,
    8: TokenType.PROP_DOT,
    10: TokenType.UINT,
    11: TokenType.UINT,
    13: TokenType.PROP_ACCENT,
    14: TokenType.SYMBOL,
    15: TokenType.BRACKET_BEGIN,
    16: TokenType.BRACKET_END,
    17: TokenType.PROP_MARCATO,
    18: TokenType.PROP_STACCATO,
    20: TokenType.PROP_TUPLET,
    44: TokenType.BLOCK_COMMENT,
    49: TokenType.CMD_END,
    67: TokenType.CMD_STOP,
    69: TokenType.CMD_TIME,
    87: TokenType.CMD_START,
    88: TokenType.CMD_TEMPO,
    90: TokenType.CMD_VOICE,
    91: TokenType.CMD_ASSIGN,
    109: TokenType.CMD_CHANNEL,
    110: TokenType.CMD_CONTROL,
    112: TokenType.CMD_PROGRAM,
    114: TokenType.CMD_VELOCITY,
}
_ACCEPT.update({s: TokenType.CMD_BAR for s in (73, 74, 75, 92)})
_ACCEPT.update({s: TokenType.CMD_KEY for s in (78, 79, 80, 81, 82, 83, 84, 95, 96, 97, 99, 101, 102)})
_ACCEPT.update({s: TokenType.CMD_PLAY for s in (104, 105, 106, 111)})

# States that swallow their input (whitespace).
_IGNORE = frozenset({1})

_REPLACEMENT = "\ufffd"


def _decode_rune(src: bytes, pos: int) -> tuple[str, int]:
    """Decode one UTF-8 character at `pos`; invalid bytes yield U+FFFD of size 1."""
    lead = src[pos]
    if lead < 0x80:
        return chr(lead), 1
    if 0xC0 <= lead < 0xE0:
        size = 2
    elif 0xE0 <= lead < 0xF0:
        size = 3
    elif 0xF0 <= lead < 0xF8:
        size = 4
    else:
        return _REPLACEMENT, 1
    try:
        char = src[pos : pos + size].decode("utf-8")
    except UnicodeDecodeError:
        return _REPLACEMENT, 1
    if len(char) != 1:
        return _REPLACEMENT, 1
    return char, size


class Lexer:
    """Splits a balafon script into tokens, longest match first."""

    def __init__(self, src: bytes | str, source: str | None = None) -> None:
        self._src = src.encode("utf-8") if isinstance(src, str) else bytes(src)
        self.source = source
        self._pos = 0
        self._line = 1
        self._column = 1

    def _advance(self, char: str) -> None:
        if char == "\n":
            self._line += 1
            self._column = 1
        elif char == "\r":
            self._column = 1
        elif char == "\t":
            self._column += 4
        else:
            self._column += 1

    def scan(self) -> Token:
        """Return the next token; an EOF token once the input is exhausted."""
        src = self._src
        if self._pos >= len(src):
            return Token(TokenType.EOF, "", Pos(self._pos, self._line, self._column, self.source))

        start, start_line, start_column, end = self._pos, self._line, self._column, 0
        tok_type = TokenType.INVALID
        state: int | None = START_STATE

        while state is not None:
            char: str | None = None
            if self._pos < len(src):
                char, size = _decode_rune(src, self._pos)
                self._pos += size

            state = next_state(state, char) if char is not None else None

            if state is None:
                if tok_type is TokenType.INVALID:
                    end = self._pos
                break

            self._advance(char)

            if state in _IGNORE:
                start, start_line, start_column = self._pos, self._line, self._column
                state = START_STATE
                if start >= len(src):
                    tok_type = TokenType.EOF
            else:
                tok_type = _ACCEPT.get(state, TokenType.INVALID)
                end = self._pos

        if end > start:
            self._pos = end
            lit = src[start:end].decode("utf-8", errors="replace")
        else:
            lit = ""

        return Token(tok_type, lit, Pos(start, start_line, start_column, self.source))

    def reset(self) -> None:
        """Rewind to the beginning of the input."""
        self._pos = 0
        self._line = 1
        self._column = 1

    def tokens(self) -> Iterator[Token]:
        """Yield tokens up to and including the EOF token."""
        while True:
            tok = self.scan()
            yield tok
            if tok.type is TokenType.EOF:
                return


def lexer_from_file(path: str | os.PathLike[str]) -> Lexer:
    """Create a lexer over the contents of a file, naming the file in positions."""
    with open(path, "rb") as f:
        src = f.read()
    return Lexer(src, source=os.fspath(path))