# balafon

`balafon` provides the building blocks of a small language for writing MIDI
music. It contains a tokenizer for scripts, syntax tree nodes for notes, groups,
bars and comments, note property lists with tick lengths, validated commands,
error types, a MusicXML score model, and bars and events with their timing.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## The language

```
:assign c 60
:time 4 4
:tempo 120
:bar intro
	c. d8 [e$ e f f#]8
	[-CE$G]16 c2 [B$A]8
:end
:play intro
```

- Commands: `:assign`, `:tempo`, `:time`, `:channel`, `:voice`, `:velocity`,
  `:program`, `:control`, `:key`, `:bar` ... `:end`, `:play`, `:start`, `:stop`.
- A letter is a note symbol and `-` is a pause. Properties follow the note:
  `#` sharp, `$` flat, a number for the note value (`8` is an eighth),
  `.` dot, `/3` and `/5` tuplets, `*` let ring, and `` ` ``, `>`, `^`, `)`
  for staccato, accent, marcato and ghost.
- `[...]` groups notes so that they share the properties written after `]`.
- `/* ... */` is a block comment; `;` and newlines end statements.

## Modules

### `balafon.lexer`

`Lexer(src, source=None)` splits bytes or text into `Token`s (`type`, `lit`,
`pos`). `scan()` returns the next token, `tokens()` yields all of them up to and
including the `TokenType.EOF` token, and `reset()` rewinds. Positions (`Pos`)
hold the byte offset, 1-based line and column (a tab counts as four columns)
and the source name. `lexer_from_file(path)` reads a file and names it in
positions.

```python
from balafon.lexer import Lexer

for token in Lexer(b":assign c 60").tokens():
    print(token.type.name, repr(token.lit), token.pos.line, token.pos.column)
```

`balafon.transitions.next_state(state, char)` exposes the automaton the lexer
runs on.

### `balafon.properties`

`new_property_list(token, inner)` prepends a property token to a list,
validating note values and tuplets, refusing a second sharp or flat, and keeping
properties ordered by kind. `PropertyList` answers `value()`, `num_dot()`,
`tuplet()`, `is_sharp()`, `is_flat()`, `num_sharp()`, `num_flat()`,
`num_staccato()`, `num_accent()`, `num_marcato()`, `num_ghost()`,
`is_let_ring()`, and `note_len()` in ticks. `merge(other)` overwrites unique
properties (accidentals, value, tuplet, let ring) and appends additive ones.

```python
from balafon.lexer import Lexer, TokenType
from balafon.properties import new_property_list

tokens = [t for t in Lexer(b"8.").tokens() if t.type is not TokenType.EOF]
props = None
for token in reversed(tokens):
    props = new_property_list(token, props)
print(props.value(), props.num_dot(), props.note_len())  # 8 1 720
```

### `balafon.nodes`

`Note`, `NoteGroup`, `NodeList`, `BarNode` and `BlockComment` print back as
script text with `str()`. `walk_notes(node, props, visit)` flattens groups and
calls `visit` with a copy of each note carrying the merged properties.
`new_block_comment(text)` strips the `/*` and `*/` delimiters.

```python
from balafon.lexer import Lexer
from balafon.nodes import NodeList, Note, NoteGroup, walk_notes
from balafon.properties import new_property_list

eighth = new_property_list(next(Lexer(b"8").tokens()), None)
group = NoteGroup(NodeList([Note("c"), Note("d")]), eighth)
print(group)  # [cd]8

notes = []
walk_notes(group, None, notes.append)
print([n.props.note_len() for n in notes])  # [480, 480]
```

### `balafon.commands`

Command classes (`CmdAssign`, `CmdTempo`, `CmdTime`, `CmdChannel`, `CmdVoice`,
`CmdVelocity`, `CmdProgram`, `CmdControl`, `CmdPlay`, `CmdStart`, `CmdStop`,
`CmdKey`) print as script text. The `new_cmd_*` functions check argument ranges
and raise `ValueError` with a message naming the range.

```python
from balafon.commands import new_cmd_tempo, new_cmd_time

print(new_cmd_tempo(120))  # :tempo 120
new_cmd_time(4, 5)         # ValueError: note value must be a power of 2 ...
```

`balafon.validation` holds the checks themselves: `validate_range`,
`validate_note_value` and `validate_tuplet`.

### `balafon.errors`

`ParseError(error_token, err=None, expected_tokens=(), ...)` formats as
`[source:]line:column: error: ...`, either the given error or a description of
the expected tokens; `details()` gives a multi-line dump.
`EvalError(err, pos)` uses the same position prefix. `describe_expected` and
`describe_token` build the wording.

### `balafon.musicxml`

Dataclasses for a partwise MusicXML score (`Score`, `PartList`, `ScorePart`,
`ScoreInstrument`, `Identification`, `Encoding`, `Part`, `Measure`,
`Attributes`, `Clef`, `Key`, `Time`, `Note`, `NoteHead`, `Backup`, `Pitch`,
`Tie`). `Score.to_xml()` returns the compact `score-partwise` element.

```python
from balafon.musicxml import Measure, Note, Part, PartList, Score, ScorePart

score = Score(
    version="3.1",
    part_list=PartList([ScorePart("P1", "Drums")]),
    parts=[Part("P1", [Measure(1, notes=[Note(duration=4, rest=True)])])],
)
print(score.to_xml())
```

### `balafon.event` and `balafon.bar`

`Event` places a message in a bar by tick position and duration, with optional
note, voice and 1-based track. `Channel` is a 0-based MIDI channel with
`human()`; `channel_from_midi` and `channel_from_human` create one. `Voice` is
a score voice from 0 to 4.

`Bar` holds events under a time signature (4/4 unless `set_time_sig` changes
it). `cap()` is its length in ticks, `is_zero_duration()` tells whether no event
has a duration, and `duration(tempo)` returns a `timedelta`, zero for
zero-duration bars.

```python
from balafon.bar import Bar
from balafon.constants import TICKS_PER_QUARTER
from balafon.event import Event

bar = Bar(events=[Event(duration=TICKS_PER_QUARTER)])
bar.set_time_sig(1, 4)
print(bar.cap(), bar.duration(60))  # 960 0:00:01
```

`balafon.constants` holds the tick resolution (960 per quarter), value ranges
and `ticks_duration(tempo, ticks)`.

## What it does not do

The package works on tokens, nodes, bars and events you build yourself. It has
no grammar parser that turns a script into a tree, no interpreter that evaluates
a script into bars, no formatter, no Standard MIDI File or MusicXML conversion
of whole scripts, no MIDI playback or port access, and no command-line tool.

## Running the tests

```
pytest
```