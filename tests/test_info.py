import pytest

from symdoc.info import (
    AccessSpecifier,
    BaseRecordInfo,
    EnumInfo,
    EnumValueInfo,
    FunctionInfo,
    Info,
    MemberTypeInfo,
    NamespaceInfo,
    RecordInfo,
    Scope,
    SymbolInfo,
    TagTypeKind,
    TypedefInfo,
)
from symdoc.javadoc import Javadoc, Paragraph, Text
from symdoc.refs import EMPTY_SID, InfoType, Location, Reference, TypeInfo

SID = bytes(range(1, 21))


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, AccessSpecifier.PUBLIC),
        (1, AccessSpecifier.PROTECTED),
        (2, AccessSpecifier.PRIVATE),
        (3, AccessSpecifier.NONE),
    ],
)
def test_access_values_fixed_by_bitcode(value, expected):
    assert MemberTypeInfo(name="x", access=value).access is expected


@pytest.mark.parametrize(
    "cls, expected",
    [
        (NamespaceInfo, InfoType.NAMESPACE),
        (RecordInfo, InfoType.RECORD),
        (BaseRecordInfo, InfoType.RECORD),
        (FunctionInfo, InfoType.FUNCTION),
        (EnumInfo, InfoType.ENUM),
        (TypedefInfo, InfoType.TYPEDEF),
    ],
)
def test_info_kind(cls, expected):
    assert cls().it == expected


def test_base_info_defaults():
    info = Info()
    assert info.it == InfoType.DEFAULT
    assert info.usr == EMPTY_SID
    assert info.namespace == []
    assert info.javadoc.is_empty()


def test_info_kind_not_settable_in_subclass():
    with pytest.raises(TypeError):
        NamespaceInfo(it=InfoType.RECORD)


def test_symbol_info_kind_coerced():
    info = SymbolInfo(it=3)
    assert info.it is InfoType.FUNCTION


def test_usr_length_checked():
    with pytest.raises(ValueError):
        RecordInfo(usr=b"short")


def test_usr_kept():
    info = FunctionInfo(usr=SID, name="f")
    assert info.usr == SID
    assert info.name == "f"


def test_enum_value_default_is_zero():
    value = EnumValueInfo(name="A")
    assert value.value == "0"
    assert value.value_expr == ""


def test_enum_value_equality():
    assert EnumValueInfo("A", "1", "1") == EnumValueInfo("A", "1", "1")
    assert not (EnumValueInfo("A", "1") == EnumValueInfo("A", "2"))


def test_member_equality_ignores_default_value():
    t = TypeInfo(Reference(name="int"))
    a = MemberTypeInfo(type=t, name="x", default_value="1")
    b = MemberTypeInfo(type=t, name="x", default_value="2")
    assert a == b


def test_member_equality_compares_access_and_doc():
    t = TypeInfo(Reference(name="int"))
    a = MemberTypeInfo(type=t, name="x")
    b = MemberTypeInfo(type=t, name="x", access=AccessSpecifier.PRIVATE)
    assert not (a == b)
    c = MemberTypeInfo(
        type=t, name="x", javadoc=Javadoc(blocks=[Paragraph([Text("doc")])])
    )
    assert not (a == c)


def test_member_access_coerced():
    member = MemberTypeInfo(name="x", access=2)
    assert member.access is AccessSpecifier.PRIVATE


def test_scope_lists_independent():
    a = Scope()
    b = Scope()
    a.records.append(Reference(usr=SID, name="R", ref_type=InfoType.RECORD))
    assert b.records == []
    assert len(a.records) == 1


def test_namespace_children_hold_infos():
    ns = NamespaceInfo(usr=SID, name="ns")
    ns.children.enums.append(EnumInfo(name="E", scoped=True))
    ns.children.typedefs.append(TypedefInfo(name="T", is_using=True))
    assert ns.children.enums[0].scoped is True
    assert ns.children.typedefs[0].it == InfoType.TYPEDEF


def test_record_defaults_and_tag_coercion():
    record = RecordInfo(tag_type=3)
    assert record.tag_type is TagTypeKind.CLASS
    assert RecordInfo().tag_type is TagTypeKind.STRUCT
    assert record.template is None
    assert record.bases == []


def test_base_record_fields():
    base = BaseRecordInfo(
        usr=SID, name="B", is_virtual=True, access=1, is_parent=True
    )
    assert base.access is AccessSpecifier.PROTECTED
    assert base.is_virtual and base.is_parent
    record = RecordInfo(bases=[base])
    assert record.bases[0].name == "B"


def test_function_defaults():
    fn = FunctionInfo()
    assert fn.access is AccessSpecifier.PUBLIC
    assert fn.is_method is False
    assert fn.parent == Reference()
    assert fn.params == []


def test_symbol_locations():
    fn = FunctionInfo(def_loc=Location(10, "a.cpp"), loc=[Location(3, "a.hpp")])
    assert fn.def_loc == Location(10, "a.cpp")
    assert fn.loc[0].filename == "a.hpp"


def test_typedef_underlying():
    td = TypedefInfo(underlying=TypeInfo(Reference(name="int")))
    assert td.underlying.type.name == "int"
    assert td.is_using is False