"""Symbol identifiers, references to symbols and small supporting records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

SYMBOL_ID_SIZE = 20
"""Length in bytes of a symbol identifier (a SHA1 digest of the USR)."""

EMPTY_SID = bytes(SYMBOL_ID_SIZE)
"""The all-zero symbol identifier, used for the global namespace."""


def _symbol_id(value) -> bytes:
    sid = bytes(value)
    if len(sid) != SYMBOL_ID_SIZE:
        raise ValueError(
            f"symbol id must be {SYMBOL_ID_SIZE} bytes, got {len(sid)}"
        )
    return sid


class InfoType(IntEnum):
    """The kind of declaration a piece of metadata describes."""

    DEFAULT = 0
    NAMESPACE = 1
    RECORD = 2
    FUNCTION = 3
    ENUM = 4
    TYPEDEF = 5


@dataclass
class Reference:
    """A reference to a symbol by identifier, name and kind.

    Two references are equal when their identifier, name and kind
    match; the path is not compared.
    """

    usr: bytes = EMPTY_SID
    name: str = ""
    ref_type: InfoType = InfoType.DEFAULT
    path: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        self.usr = _symbol_id(self.usr)
        self.ref_type = InfoType(self.ref_type)


@dataclass(order=True)
class Location:
    """A line in a source file.

    Locations compare and sort by line number, then file name.
    """

    line_number: int = 0
    filename: str = ""
    is_file_in_root_dir: bool = field(default=False, compare=False)


@dataclass
class TemplateParamInfo:
    """The literal source text of one template parameter, e.g. ``class T``."""

    contents: str = ""


@dataclass
class TemplateSpecializationInfo:
    """The template a declaration specializes, and the arguments used."""

    specialization_of: bytes = EMPTY_SID
    params: list[TemplateParamInfo] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.specialization_of = _symbol_id(self.specialization_of)


@dataclass
class TemplateInfo:
    """Template information for a record or function."""

    params: list[TemplateParamInfo] = field(default_factory=list)
    specialization: TemplateSpecializationInfo | None = None


@dataclass
class TypeInfo:
    """A reference to the type used in some declaration."""

    type: Reference = field(default_factory=Reference)


@dataclass
class FieldTypeInfo(TypeInfo):
    """A typed, named field such as a function parameter."""

    name: str = ""
    default_value: str = ""


@dataclass
class Index(Reference):
    """A node in the tree of all emitted symbols, grouped by namespace."""

    jump_to_section: str | None = None
    children: list[Index] = field(default_factory=list)

    def find_child(self, usr) -> Index | None:
        """Return the direct child with identifier ``usr``, or None."""
        sid = _symbol_id(usr)
        return next((child for child in self.children if child.usr == sid), None)