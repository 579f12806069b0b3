"""Syntax tree nodes for notes, note groups, bars and comments."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace

from balafon.lexer import Pos, Token
from balafon.properties import PropertyList


class NodeList(list):
    """A sequence of nodes printed back to back."""

    def __str__(self) -> str:
        return "".join(str(node) for node in self)


@dataclass
class Note:
    """A single note or pause with its properties."""

    name: str
    props: PropertyList = field(default_factory=PropertyList)
    pos: Pos = field(default_factory=Pos)

    def __str__(self) -> str:
        return f"{self.name}{self.props}"

    def is_pause(self) -> bool:
        """Report whether the note is a pause."""
        return self.name == "-"


@dataclass
class NoteGroup:
    """A bracketed group of notes sharing properties."""

    nodes: NodeList = field(default_factory=NodeList)
    props: PropertyList = field(default_factory=PropertyList)

    def __str__(self) -> str:
        return f"[{self.nodes}]{self.props}"


@dataclass
class BarNode:
    """A named bar declaration."""

    pos: Pos
    name: str
    decl_list: NodeList = field(default_factory=NodeList)

    def __str__(self) -> str:
        body = "".join(f"\t{stmt}" for stmt in self.decl_list)
        return f":bar {self.name}\n{body}:end"


@dataclass
class BlockComment:
    """A block comment; `text` excludes the delimiters."""

    text: str

    def __str__(self) -> str:
        return f"/*{self.text}*/"


def new_block_comment(text: str) -> BlockComment:
    """Create a block comment from its literal including the delimiters."""
    return BlockComment(text[2:-2])


def walk_notes(
    node: object,
    props: Iterable[Token] | None,
    visit: Callable[[Note], None],
) -> None:
    """Flatten notes, groups and properties, calling `visit` with a merged copy of every note."""
    inherited = PropertyList(props or ())
    if isinstance(node, NodeList):
        for child in node:
            walk_notes(child, inherited, visit)
    elif isinstance(node, NoteGroup):
        merged = node.props.merge(inherited)
        for child in node.nodes:
            walk_notes(child, merged, visit)
    elif isinstance(node, Note):
        visit(replace(node, props=node.props.merge(inherited)))