"""Note property lists: accidentals, articulations, values, dots and tuplets."""

from __future__ import annotations

from collections.abc import Iterable

from balafon.constants import TICKS_PER_WHOLE
from balafon.lexer import Token, TokenType
from balafon.validation import validate_note_value, validate_tuplet

_UNIQUE = frozenset(
    {
        TokenType.PROP_SHARP,
        TokenType.PROP_FLAT,
        TokenType.UINT,
        TokenType.PROP_TUPLET,
        TokenType.PROP_LET_RING,
    }
)


class PropertyList(tuple):
    """An immutable sequence of property tokens attached to a note or group."""

    def __str__(self) -> str:
        return "".join(tok.lit for tok in self)

    def _find(self, typ: TokenType) -> int:
        return next((i for i, tok in enumerate(self) if tok.type is typ), -1)

    def _has(self, typ: TokenType) -> bool:
        return self._find(typ) != -1

    def _count(self, typ: TokenType) -> int:
        return sum(1 for tok in self if tok.type is typ)

    def merge(self, other: Iterable[Token] | None) -> PropertyList:
        """Return a copy with `other` merged in.

        Unique properties in `other` overwrite existing ones; additive
        properties are appended.
        """
        result = list(self)
        for prop in other or ():
            if prop.type in _UNIQUE:
                idx = next((i for i, tok in enumerate(result) if tok.type is prop.type), -1)
                if idx != -1:
                    result[idx] = prop
                    continue
            result.append(prop)
        return PropertyList(result)

    def note_len(self) -> int:
        """Return the note duration in ticks."""
        length = TICKS_PER_WHOLE // self.value()
        total = length
        for _ in range(self.num_dot()):
            length //= 2
            total += length
        division = self.tuplet()
        if division > 0:
            total = total * 2 // division
        return total

    def is_sharp(self) -> bool:
        return self._has(TokenType.PROP_SHARP)

    def is_flat(self) -> bool:
        return self._has(TokenType.PROP_FLAT)

    def num_sharp(self) -> int:
        return self._count(TokenType.PROP_SHARP)

    def num_flat(self) -> int:
        return self._count(TokenType.PROP_FLAT)

    def num_staccato(self) -> int:
        return self._count(TokenType.PROP_STACCATO)

    def num_accent(self) -> int:
        return self._count(TokenType.PROP_ACCENT)

    def num_marcato(self) -> int:
        return self._count(TokenType.PROP_MARCATO)

    def num_ghost(self) -> int:
        return self._count(TokenType.PROP_GHOST)

    def value(self) -> int:
        """Return the note value (1, 2, 4, 8, ...); a quarter note when unset."""
        idx = self._find(TokenType.UINT)
        if idx == -1:
            return 4
        return int(self[idx].lit) & 0xFF

    def num_dot(self) -> int:
        return self._count(TokenType.PROP_DOT)

    def tuplet(self) -> int:
        """Return the tuplet division, or 0 if the note is not a tuplet."""
        idx = self._find(TokenType.PROP_TUPLET)
        if idx == -1:
            return 0
        return int(self[idx].lit[1:])

    def is_let_ring(self) -> bool:
        return self._has(TokenType.PROP_LET_RING)


def new_property_list(token: Token, inner: PropertyList | None) -> PropertyList:
    """Prepend `token` to `inner`, validating it and keeping properties sorted by kind."""
    if token.type is TokenType.UINT:
        validate_note_value(int(token.lit))
    elif token.type is TokenType.PROP_TUPLET:
        validate_tuplet(int(token.lit[1:]))

    if inner is None:
        return PropertyList((token,))

    inner = PropertyList(inner)
    if token.type in (TokenType.PROP_SHARP, TokenType.PROP_FLAT):
        if inner._has(TokenType.PROP_SHARP) or inner._has(TokenType.PROP_FLAT):
            raise ValueError("duplicate sharp or flat property")

    return PropertyList(sorted((token, *inner), key=lambda tok: tok.type))