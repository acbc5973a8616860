"""Metadata describing the declarations extracted from source code."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .javadoc import Javadoc
from .refs import (
    EMPTY_SID,
    SYMBOL_ID_SIZE,
    FieldTypeInfo,
    InfoType,
    Location,
    Reference,
    TemplateInfo,
    TypeInfo,
)


class AccessSpecifier(IntEnum):
    """Access level of a member or base class."""

    PUBLIC = 0
    PROTECTED = 1
    PRIVATE = 2
    NONE = 3


class TagTypeKind(IntEnum):
    """The keyword a record was declared with."""

    STRUCT = 0
    INTERFACE = 1
    UNION = 2
    CLASS = 3
    ENUM = 4


def _check_usr(value) -> bytes:
    sid = bytes(value)
    if len(sid) != SYMBOL_ID_SIZE:
        raise ValueError(
            f"symbol id must be {SYMBOL_ID_SIZE} bytes, got {len(sid)}"
        )
    return sid


@dataclass(eq=False)
class MemberTypeInfo(FieldTypeInfo):
    """A data member of a record.

    Members are equal when type, name, access and doc comment match;
    the default value is not compared.
    """

    access: AccessSpecifier = AccessSpecifier.PUBLIC
    javadoc: Javadoc = field(default_factory=Javadoc)

    def __post_init__(self) -> None:
        self.access = AccessSpecifier(self.access)

    def __eq__(self, other) -> bool:
        if not isinstance(other, MemberTypeInfo):
            return NotImplemented
        return (
            self.type == other.type
            and self.name == other.name
            and self.access == other.access
            and self.javadoc == other.javadoc
        )

    __hash__ = None


@dataclass
class Info:
    """Properties common to all symbols."""

    usr: bytes = EMPTY_SID
    it: InfoType = InfoType.DEFAULT
    name: str = ""
    namespace: list[Reference] = field(default_factory=list)
    """Enclosing namespaces, innermost first."""
    javadoc: Javadoc = field(default_factory=Javadoc)
    path: str = ""

    def __post_init__(self) -> None:
        self.usr = _check_usr(self.usr)
        self.it = InfoType(self.it)


@dataclass
class SymbolInfo(Info):
    """A symbol that has source locations."""

    def_loc: Location | None = None
    """Where the symbol is defined, if known."""
    loc: list[Location] = field(default_factory=list)
    """Where the symbol is declared."""


@dataclass
class EnumValueInfo:
    """One enumerator of an enumeration."""

    name: str = ""
    value: str = "0"
    """The computed value of the enumerator."""
    value_expr: str = ""
    """The initializer as written, empty for implicit values."""


@dataclass
class EnumInfo(SymbolInfo):
    """An enumeration."""

    it: InfoType = field(default=InfoType.ENUM, init=False)
    scoped: bool = False
    base_type: TypeInfo | None = None
    """The underlying type, for an explicitly typed enumeration."""
    members: list[EnumValueInfo] = field(default_factory=list)


@dataclass
class TypedefInfo(SymbolInfo):
    """A typedef or alias declaration."""

    it: InfoType = field(default=InfoType.TYPEDEF, init=False)
    underlying: TypeInfo = field(default_factory=TypeInfo)
    is_using: bool = False
    """True for an alias declaration, False for a C-style typedef."""


@dataclass
class Scope:
    """The declarations contained in a namespace or record.

    Namespaces, records and functions are referenced; enumerations
    and typedefs are held in full.
    """

    namespaces: list[Reference] = field(default_factory=list)
    records: list[Reference] = field(default_factory=list)
    functions: list[Reference] = field(default_factory=list)
    enums: list[EnumInfo] = field(default_factory=list)
    typedefs: list[TypedefInfo] = field(default_factory=list)


@dataclass
class NamespaceInfo(Info):
    """A namespace."""

    it: InfoType = field(default=InfoType.NAMESPACE, init=False)
    children: Scope = field(default_factory=Scope)


@dataclass
class RecordInfo(SymbolInfo):
    """A class, struct or union."""

    it: InfoType = field(default=InfoType.RECORD, init=False)
    tag_type: TagTypeKind = TagTypeKind.STRUCT
    full_name: str = ""
    template: TemplateInfo | None = None
    is_type_def: bool = False
    """True for an anonymous record named through a typedef."""
    members: list[MemberTypeInfo] = field(default_factory=list)
    parents: list[Reference] = field(default_factory=list)
    virtual_parents: list[Reference] = field(default_factory=list)
    bases: list[BaseRecordInfo] = field(default_factory=list)
    children: Scope = field(default_factory=Scope)

    def __post_init__(self) -> None:
        super().__post_init__()
        self.tag_type = TagTypeKind(self.tag_type)


@dataclass
class BaseRecordInfo(RecordInfo):
    """A base class of a record, with how it is inherited."""

    is_virtual: bool = False
    access: AccessSpecifier = AccessSpecifier.PUBLIC
    is_parent: bool = False
    """True when this base is a direct parent."""

    def __post_init__(self) -> None:
        super().__post_init__()
        self.access = AccessSpecifier(self.access)


@dataclass
class FunctionInfo(SymbolInfo):
    """A function or member function."""

    it: InfoType = field(default=InfoType.FUNCTION, init=False)
    is_method: bool = False
    parent: Reference = field(default_factory=Reference)
    """The record declaring this method."""
    return_type: TypeInfo = field(default_factory=TypeInfo)
    params: list[FieldTypeInfo] = field(default_factory=list)
    access: AccessSpecifier = AccessSpecifier.PUBLIC
    full_name: str = ""
    template: TemplateInfo | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        self.access = AccessSpecifier(self.access)