import io

import pytest

from symdoc.config import Config
from symdoc.corpus import Corpus, symbol_compare
from symdoc.info import FunctionInfo, NamespaceInfo, RecordInfo
from symdoc.javadoc import Javadoc, Paragraph, Text
from symdoc.refs import InfoType, Reference
from symdoc.reporter import Reporter


def sid(n):
    return bytes([n]) * 20


def make_corpus():
    config = Config("/project/")
    config.verbose = False
    return Corpus(config)


def make_reporter():
    out, err = io.StringIO(), io.StringIO()
    return Reporter(out, err), out, err


@pytest.mark.parametrize(
    "s0, s1, expected",
    [
        ("a", "b", True),
        ("b", "a", False),
        ("B", "a", False),
        ("a", "B", True),
        ("a", "A", True),
        ("A", "a", False),
        ("ab", "abc", True),
        ("abc", "ab", False),
        ("abc", "abc", False),
        ("aB", "Ab", True),
        ("Ab", "aB", False),
    ],
)
def test_symbol_compare(s0, s1, expected):
    assert symbol_compare(s0, s1) is expected


def test_symbol_compare_sort_order():
    ordered = ["a", "A", "ab", "b", "B"]
    for earlier, later in zip(ordered, ordered[1:]):
        assert symbol_compare(earlier, later) is True
        assert symbol_compare(later, earlier) is False


def test_symbol_compare_is_asymmetric():
    names = ["x", "X", "xy", "Xy", "xY", "y", ""]
    for a in names:
        assert not symbol_compare(a, a)
        for b in names:
            assert not (symbol_compare(a, b) and symbol_compare(b, a))


def test_global_namespace_id_is_empty():
    assert Corpus.global_namespace_id() == bytes(20)


def test_insert_and_find():
    corpus = make_corpus()
    ns = NamespaceInfo(usr=sid(0), name="")
    corpus.insert(ns)
    assert corpus.find(sid(0)) is ns
    assert corpus.get(sid(0)) is ns
    assert corpus.global_namespace() is ns
    assert corpus.exists(sid(0))
    assert not corpus.exists(sid(5))
    assert corpus.find(sid(5)) is None
    assert corpus.all_symbols == [sid(0)]


def test_get_missing_raises():
    corpus = make_corpus()
    with pytest.raises(KeyError):
        corpus.get(sid(3))


def test_index_builds_namespace_tree():
    corpus = make_corpus()
    outer = Reference(sid(1), "A", InfoType.NAMESPACE)
    inner = Reference(sid(2), "B", InfoType.NAMESPACE)
    rec = RecordInfo(usr=sid(3), name="X", namespace=[inner, outer], path="p")
    corpus.insert(rec)

    a = corpus.index.find_child(sid(1))
    assert a.name == "A"
    b = a.find_child(sid(2))
    assert b.name == "B"
    x = b.find_child(sid(3))
    assert x.name == "X"
    assert x.ref_type == InfoType.RECORD
    assert x.path == "p"


def test_index_fills_existing_entry():
    corpus = make_corpus()
    outer = Reference(sid(1), "", InfoType.NAMESPACE)
    corpus.insert(FunctionInfo(usr=sid(4), name="f", namespace=[outer]))
    corpus.insert(NamespaceInfo(usr=sid(1), name="A", path="dir"))

    assert len(corpus.index.children) == 1
    entry = corpus.index.children[0]
    assert entry.name == "A"
    assert entry.path == "dir"
    assert len(entry.children) == 1


def test_canonicalize_without_global_namespace_fails():
    corpus = make_corpus()
    reporter, _, err = make_reporter()
    assert corpus._canonicalize(reporter) is False
    assert err.getvalue() == "error: Couldn't find global namespace.\n"
    assert reporter.exit_code() == 1


def test_canonicalize_sorts_and_freezes():
    corpus = make_corpus()
    reporter, _, _ = make_reporter()
    root = NamespaceInfo(usr=sid(0))
    root.children.namespaces = [
        Reference(sid(2), "b", InfoType.NAMESPACE),
        Reference(sid(1), "A", InfoType.NAMESPACE),
    ]
    doc = Javadoc(blocks=[Paragraph(children=[Text("hello")])])
    corpus.insert(root)
    corpus.insert(NamespaceInfo(usr=sid(2), name="b", javadoc=doc))
    corpus.insert(NamespaceInfo(usr=sid(1), name="A"))

    assert corpus._canonicalize(reporter) is True
    assert [r.name for r in root.children.namespaces] == ["A", "b"]
    assert corpus.all_symbols == [sid(0), sid(1), sid(2)]
    assert doc.brief == Paragraph(children=[Text("hello")])
    assert doc.blocks == []

    with pytest.raises(RuntimeError):
        corpus.insert(NamespaceInfo(usr=sid(7), name="c"))
    assert not corpus.exists(sid(7))


def test_canonicalize_prints_when_verbose():
    config = Config("/project/")
    corpus = Corpus(config)
    reporter, out, _ = make_reporter()
    corpus.insert(NamespaceInfo(usr=sid(0)))
    assert corpus._canonicalize(reporter) is True
    assert out.getvalue() == "Canonicalizing...\n"