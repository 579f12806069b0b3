"""Errors reported while parsing and evaluating balafon scripts."""

from __future__ import annotations

from collections.abc import Sequence

from balafon.lexer import Pos, Token, TokenType

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t", "\r": "\\r", "\a": "\\a", "\b": "\\b", "\f": "\\f", "\v": "\\v"}


def _quote(text: str) -> str:
    parts = []
    for char in text:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif char.isprintable():
            parts.append(char)
        elif ord(char) < 0x80:
            parts.append(f"\\x{ord(char):02x}")
        elif ord(char) <= 0xFFFF:
            parts.append(f"\\u{ord(char):04x}")
        else:
            parts.append(f"\\U{ord(char):08x}")
    return '"' + "".join(parts) + '"'


def describe_expected(tokens: Sequence[str]) -> str:
    """Describe a list of expected tokens in words."""
    tokens = list(tokens)
    if not tokens:
        return "unexpected additional tokens"
    if len(tokens) == 1:
        return "expected " + tokens[0]
    if len(tokens) == 2:
        return f"expected either {tokens[0]} or {tokens[1]}"
    if len(tokens) == 3:
        return f"expected one of {tokens[0]}, {tokens[1]} or {tokens[2]}"
    return "expected one of " + ", ".join([*tokens[:-1], "or " + tokens[-1]])


def describe_token(token: Token) -> str:
    """Describe a token for an error message."""
    if token.type is TokenType.INVALID:
        return f"unknown/invalid token {_quote(token.lit)}"
    if token.type is TokenType.EOF:
        return "end-of-file"
    return _quote(token.lit)


class ParseError(Exception):
    """A syntax error at a token."""

    def __init__(
        self,
        error_token: Token,
        err: BaseException | str | None = None,
        expected_tokens: Sequence[str] = (),
        error_symbols: Sequence[object] = (),
        stack_top: int = 0,
    ) -> None:
        self.error_token = error_token
        self.err = err
        self.expected_tokens = list(expected_tokens)
        self.error_symbols = list(error_symbols)
        self.stack_top = stack_top
        super().__init__(self._message())

    @property
    def pos(self) -> Pos:
        return self.error_token.pos

    def _message(self) -> str:
        pos = self.error_token.pos
        text = f"{pos.line}:{pos.column}: error: "
        if pos.source is not None:
            text = f"{pos.source}:{text}"

        if self.err is not None:
            return text + str(self.err)

        tokens = [tok if tok and tok[0].isalpha() else _quote(tok) for tok in self.expected_tokens]
        return f"{text}{describe_expected(tokens)}; got: {describe_token(self.error_token)}"

    def __str__(self) -> str:
        return self._message()

    def details(self) -> str:
        """Return a multi-line diagnostic dump of the error."""
        tok = self.error_token
        lines = [f"Error  {self.err}\n" if self.err is not None else "Error\n"]
        lines.append(f"Token: type={int(tok.type)}, lit={tok.lit}\n")
        lines.append(f"Pos: offset={tok.pos.offset}, line={tok.pos.line}, column={tok.pos.column}\n")
        lines.append("Expected one of: ")
        lines.extend(f"{sym} " for sym in self.expected_tokens)
        lines.append("ErrorSymbol:\n")
        lines.extend(f"{sym}\n" for sym in self.error_symbols)
        return "".join(lines)


class EvalError(Exception):
    """An error found while evaluating a parsed script."""

    def __init__(self, err: BaseException | str, pos: Pos) -> None:
        self.err = err
        self.pos = pos
        super().__init__(str(self))

    def __str__(self) -> str:
        prefix = f"{self.pos.line}:{self.pos.column}: error: "
        if self.pos.source is not None:
            prefix = f"{self.pos.source}:{prefix}"
        return prefix + str(self.err)