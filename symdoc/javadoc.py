"""Processed documentation comments attached to declarations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Iterable


class Kind(IntEnum):
    """The kind of a documentation node."""

    TEXT = 1
    STYLED = 2
    BLOCK = 3
    PARAGRAPH = 4
    BRIEF = 5
    ADMONITION = 6
    CODE = 7
    PARAM = 8
    TPARAM = 9
    RETURNS = 10


class Style(IntEnum):
    """A text style."""

    NONE = 1
    MONO = 2
    BOLD = 3
    ITALIC = 4


class Admonish(IntEnum):
    """An admonition style."""

    NONE = 1
    NOTE = 2
    TIP = 3
    IMPORTANT = 4
    CAUTION = 5
    WARNING = 6


@dataclass
class Node:
    """Base of every documentation node."""

    kind: ClassVar[Kind]


@dataclass
class Text(Node):
    """A string of plain text."""

    kind: ClassVar[Kind] = Kind.TEXT
    string: str = ""


@dataclass
class StyledText(Text):
    """A piece of styled text."""

    kind: ClassVar[Kind] = Kind.STYLED
    style: Style = Style.NONE


@dataclass
class Block(Node):
    """A piece of block content; the top level is a list of blocks."""

    kind: ClassVar[Kind] = Kind.BLOCK


@dataclass
class Paragraph(Block):
    """A sequence of text nodes."""

    kind: ClassVar[Kind] = Kind.PARAGRAPH
    children: list[Text] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Return True if the paragraph has no text."""
        return not self.children


@dataclass
class Brief(Paragraph):
    """The brief description."""

    kind: ClassVar[Kind] = Kind.BRIEF


@dataclass
class Admonition(Paragraph):
    """Documentation for an admonition."""

    kind: ClassVar[Kind] = Kind.ADMONITION
    style: Admonish = Admonish.NONE


@dataclass
class Code(Paragraph):
    """Preformatted source code."""

    kind: ClassVar[Kind] = Kind.CODE


@dataclass
class Param(Paragraph):
    """Documentation for a function parameter."""

    kind: ClassVar[Kind] = Kind.PARAM
    name: str = ""


@dataclass
class TParam(Paragraph):
    """Documentation for a template parameter."""

    kind: ClassVar[Kind] = Kind.TPARAM
    name: str = ""


@dataclass
class Returns(Paragraph):
    """Documentation for a function return value."""

    kind: ClassVar[Kind] = Kind.RETURNS


class Javadoc:
    """A processed doc comment attached to a declaration."""

    def __init__(
        self,
        blocks: Iterable[Block] | None = None,
        params: Iterable[Param] | None = None,
        tparams: Iterable[TParam] | None = None,
        returns: Returns | None = None,
    ):
        self.blocks: list[Block] = list(blocks or ())
        self.params: list[Param] = list(params or ())
        self.tparams: list[TParam] = list(tparams or ())
        self.returns: Returns = returns if returns is not None else Returns()
        self.brief: Paragraph | None = None

    def __eq__(self, other) -> bool:
        if not isinstance(other, Javadoc):
            return NotImplemented
        return (
            self.brief == other.brief
            and self.blocks == other.blocks
            and self.params == other.params
            and self.tparams == other.tparams
            and self.returns == other.returns
        )

    def __repr__(self) -> str:
        return (
            f"Javadoc(brief={self.brief!r}, blocks={self.blocks!r}, "
            f"params={self.params!r}, tparams={self.tparams!r}, "
            f"returns={self.returns!r})"
        )

    def is_empty(self) -> bool:
        """Return True if the comment holds no content at all."""
        return (
            self.brief is None
            and not self.blocks
            and not self.params
            and not self.tparams
            and self.returns.is_empty()
        )

    def append(self, node: Node) -> None:
        """Add a top level element to the comment."""
        if isinstance(node, Param):
            self.params.append(node)
        elif isinstance(node, TParam):
            self.tparams.append(node)
        elif isinstance(node, Block):
            self.blocks.append(node)
        else:
            raise TypeError(f"cannot append {type(node).__name__} at top level")

    def _extract_first(self, kind: Kind) -> Block | None:
        index = next(
            (i for i, block in enumerate(self.blocks) if block.kind == kind), None
        )
        if index is None:
            return None
        return self.blocks.pop(index)

    def calculate_brief(self) -> None:
        """Move the brief out of the blocks.

        The first explicit brief becomes the brief; failing that the
        first paragraph does; otherwise there is no brief.
        """
        brief = self._extract_first(Kind.BRIEF)
        if brief is None:
            brief = self._extract_first(Kind.PARAGRAPH)
        self.brief = brief