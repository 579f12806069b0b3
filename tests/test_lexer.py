import pytest

from balafon.lexer import Lexer, Pos, TokenType, lexer_from_file


def types(src):
    return [t.type for t in Lexer(src).tokens()]


def test_assign_command():
    toks = list(Lexer(":assign c 60").tokens())
    assert [t.type for t in toks] == [
        TokenType.CMD_ASSIGN,
        TokenType.SYMBOL,
        TokenType.UINT,
        TokenType.EOF,
    ]
    assert [t.lit for t in toks] == [":assign", "c", "60", ""]


def test_offsets_match_literals():
    src = ":assign c 60; :bar intro c8. :end\n:play intro"
    for tok in Lexer(src).tokens():
        assert src[tok.pos.offset : tok.pos.offset + len(tok.lit)] == tok.lit


def test_bar_and_play_include_name():
    toks = list(Lexer(":bar 1a\n:play 1a").tokens())
    assert toks[0].type is TokenType.CMD_BAR
    assert toks[0].lit == ":bar 1a"
    assert toks[1].type is TokenType.TERMINATOR
    assert toks[2].type is TokenType.CMD_PLAY
    assert toks[2].lit == ":play 1a"


@pytest.mark.parametrize("key", ["C", "F#", "Bb", "Ebm", "F#m", "Am"])
def test_key_command(key):
    toks = list(Lexer(f":key {key}").tokens())
    assert toks[0].type is TokenType.CMD_KEY
    assert toks[0].lit == f":key {key}"


@pytest.mark.parametrize(
    "src,expected",
    [
        (":tempo", TokenType.CMD_TEMPO),
        (":time", TokenType.CMD_TIME),
        (":channel", TokenType.CMD_CHANNEL),
        (":voice", TokenType.CMD_VOICE),
        (":velocity", TokenType.CMD_VELOCITY),
        (":program", TokenType.CMD_PROGRAM),
        (":control", TokenType.CMD_CONTROL),
        (":start", TokenType.CMD_START),
        (":stop", TokenType.CMD_STOP),
        (":end", TokenType.CMD_END),
    ],
)
def test_commands(src, expected):
    assert types(src) == [expected, TokenType.EOF]


def test_note_properties():
    assert types("k/3.#8") == [
        TokenType.SYMBOL,
        TokenType.PROP_TUPLET,
        TokenType.PROP_DOT,
        TokenType.PROP_SHARP,
        TokenType.UINT,
        TokenType.EOF,
    ]
    assert types("[-]$`>^)*") == [
        TokenType.BRACKET_BEGIN,
        TokenType.PAUSE,
        TokenType.BRACKET_END,
        TokenType.PROP_FLAT,
        TokenType.PROP_STACCATO,
        TokenType.PROP_ACCENT,
        TokenType.PROP_MARCATO,
        TokenType.PROP_GHOST,
        TokenType.PROP_LET_RING,
        TokenType.EOF,
    ]


def test_block_comment():
    src = "/*\nmulti line\n*/"
    toks = list(Lexer(src).tokens())
    assert toks[0].type is TokenType.BLOCK_COMMENT
    assert toks[0].lit == src


def test_invalid_character():
    tok = Lexer("@").scan()
    assert tok.type is TokenType.INVALID
    assert tok.lit == "@"


def test_whitespace_only_is_eof():
    tok = Lexer("  \t ").scan()
    assert tok.type is TokenType.EOF
    assert tok.lit == ""


def test_line_counting():
    toks = list(Lexer("a\nb").tokens())
    assert toks[2].lit == "b"
    assert toks[2].pos.line == toks[0].pos.line + 1
    assert toks[2].pos.column == toks[0].pos.column


def test_scan_after_end_keeps_returning_eof():
    lex = Lexer("c")
    lex.scan()
    assert lex.scan().type is TokenType.EOF
    assert lex.scan().type is TokenType.EOF


def test_reset_rewinds():
    lex = Lexer("c d")
    first = [t for t in lex.tokens()]
    lex.reset()
    second = [t for t in lex.tokens()]
    assert first == second


def test_bytes_input_equals_str_input():
    assert list(Lexer(b":assign c 60").tokens()) == list(Lexer(":assign c 60").tokens())


def test_lexer_from_file(tmp_path):
    path = tmp_path / "song.bal"
    path.write_text(":tempo 120\n")
    toks = list(lexer_from_file(path).tokens())
    assert toks[0].pos == Pos(0, 1, 1, str(path))
    assert [t.type for t in toks] == [
        TokenType.CMD_TEMPO,
        TokenType.UINT,
        TokenType.TERMINATOR,
        TokenType.EOF,
    ]