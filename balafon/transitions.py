"""State transition table of the script lexer's finite automaton."""

from __future__ import annotations

NUM_STATES = 115
START_STATE = 0

_Range = tuple[str, str, int]


def _one(char: str, target: int) -> _Range:
    return (char, char, target)


def _letters(target: int) -> tuple[_Range, _Range]:
    return (("A", "Z", target), ("a", "z", target))


_TABLE: dict[int, tuple[_Range, ...]] = {
    0: (
        _one("\t", 1),
        _one("\n", 2),
        _one("\r", 1),
        _one(" ", 1),
        _one("#", 3),
        _one("$", 4),
        _one(")", 5),
        _one("*", 6),
        _one("-", 7),
        _one(".", 8),
        _one("/", 9),
        _one("0", 10),
        ("1", "9", 11),
        _one(":", 12),
        _one(";", 2),
        _one(">", 13),
        ("A", "Z", 14),
        _one("[", 15),
        _one("]", 16),
        _one("^", 17),
        _one("`", 18),
        ("a", "z", 14),
    ),
    9: (_one("*", 19), _one("3", 20), _one("5", 20)),
    11: (("0", "9", 11),),
    12: (
        _one("a", 21),
        _one("b", 22),
        _one("c", 23),
        _one("e", 24),
        _one("k", 25),
        _one("p", 26),
        _one("s", 27),
        _one("t", 28),
        _one("v", 29),
    ),
    19: (_one("*", 30),),
    21: (_one("s", 31),),
    22: (_one("a", 32),),
    23: (_one("h", 33), _one("o", 34)),
    24: (_one("n", 35),),
    25: (_one("e", 36),),
    26: (_one("l", 37), _one("r", 38)),
    27: (_one("t", 39),),
    28: (_one("e", 40), _one("i", 41)),
    29: (_one("e", 42), _one("o", 43)),
    30: (_one("*", 30), _one("/", 44)),
    31: (_one("s", 45),),
    32: (_one("r", 46),),
    33: (_one("a", 47),),
    34: (_one("n", 48),),
    35: (_one("d", 49),),
    36: (_one("y", 50),),
    37: (_one("a", 51),),
    38: (_one("o", 52),),
    39: (_one("a", 53), _one("o", 54)),
    40: (_one("m", 55),),
    41: (_one("m", 56),),
    42: (_one("l", 57),),
    43: (_one("i", 58),),
    45: (_one("i", 59),),
    46: (_one("\t", 60), _one(" ", 60)),
    47: (_one("n", 61),),
    48: (_one("t", 62),),
    50: (_one("\t", 63), _one(" ", 63)),
    51: (_one("y", 64),),
    52: (_one("g", 65),),
    53: (_one("r", 66),),
    54: (_one("p", 67),),
    55: (_one("p", 68),),
    56: (_one("e", 69),),
    57: (_one("o", 70),),
    58: (_one("c", 71),),
    59: (_one("g", 72),),
    60: (
        _one("\t", 60),
        _one(" ", 60),
        _one("0", 73),
        ("1", "9", 74),
        *_letters(75),
    ),
    61: (_one("n", 76),),
    62: (_one("r", 77),),
    63: (
        _one("\t", 63),
        _one(" ", 63),
        _one("A", 78),
        _one("B", 79),
        _one("C", 80),
        _one("D", 81),
        _one("E", 82),
        _one("F", 83),
        _one("G", 84),
    ),
    64: (_one("\t", 85), _one(" ", 85)),
    65: (_one("r", 86),),
    66: (_one("t", 87),),
    68: (_one("o", 88),),
    70: (_one("c", 89),),
    71: (_one("e", 90),),
    72: (_one("n", 91),),
    73: (_one("0", 73), ("1", "9", 92), *_letters(75)),
    74: (("0", "9", 74), *_letters(75)),
    75: (_one("0", 73), ("1", "9", 92), *_letters(75)),
    76: (_one("e", 93),),
    77: (_one("o", 94),),
    78: (_one("b", 95), _one("m", 96)),
    79: (_one("b", 97), _one("m", 96)),
    80: (_one("#", 98), _one("m", 99)),
    81: (_one("#", 100), _one("b", 95), _one("m", 99)),
    82: (_one("b", 101), _one("m", 96)),
    83: (_one("#", 102), _one("m", 99)),
    84: (_one("#", 103), _one("b", 95), _one("m", 99)),
    85: (
        _one("\t", 85),
        _one(" ", 85),
        _one("0", 104),
        ("1", "9", 105),
        *_letters(106),
    ),
    86: (_one("a", 107),),
    89: (_one("i", 108),),
    92: (("0", "9", 92), *_letters(75)),
    93: (_one("l", 109),),
    94: (_one("l", 110),),
    97: (_one("m", 99),),
    98: (_one("m", 96),),
    100: (_one("m", 96),),
    101: (_one("m", 99),),
    102: (_one("m", 96),),
    103: (_one("m", 96),),
    104: (_one("0", 104), ("1", "9", 111), *_letters(106)),
    105: (("0", "9", 105), *_letters(106)),
    106: (_one("0", 104), ("1", "9", 111), *_letters(106)),
    107: (_one("m", 112),),
    108: (_one("t", 113),),
    111: (("0", "9", 111), *_letters(106)),
    113: (_one("y", 114),),
}

# Inside a block comment any character not listed above keeps the comment open.
_DEFAULTS: dict[int, int] = {19: 19, 30: 19}


def next_state(state: int, char: str) -> int | None:
    """Return the state reached from `state` on `char`, or None if there is none."""
    if not 0 <= state < NUM_STATES:
        raise ValueError(f"state must be in range [0, {NUM_STATES - 1}], got: {state}")
    if len(char) != 1:
        raise ValueError(f"expected a single character, got: {char!r}")
    for low, high, target in _TABLE.get(state, ()):
        if low <= char <= high:
            return target
    return _DEFAULTS.get(state)