"""The collection of extracted declarations, keyed by symbol identifier."""

from __future__ import annotations

import threading
from functools import cmp_to_key

from .info import EnumInfo, FunctionInfo, Info, NamespaceInfo, RecordInfo, Scope, TypedefInfo
from .refs import EMPTY_SID, Index, Reference, _symbol_id


def _lower(ch: str) -> str:
    return chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch


def symbol_compare(s0: str, s1: str) -> bool:
    """Return True if ``s0`` sorts before ``s1``.

    Strings are compared without regard to ASCII case first; when they
    are equal that way, lowercase letters come before uppercase ones at
    the first position where the two differ.
    """
    tiebreak = 0
    for c0, c1 in zip(s0, s1):
        lc0, lc1 = _lower(c0), _lower(c1)
        if lc0 != lc1:
            return lc0 < lc1
        if tiebreak == 0 and c0 != c1:
            tiebreak = -1 if c0 > c1 else 1
    if len(s0) != len(s1):
        return len(s0) < len(s1)
    return tiebreak < 0


def _symbol_cmp(s0: str, s1: str) -> int:
    if symbol_compare(s0, s1):
        return -1
    if symbol_compare(s1, s0):
        return 1
    return 0


_SYMBOL_KEY = cmp_to_key(_symbol_cmp)


def _qualified_name(info: Info) -> str:
    parts = [ref.name for ref in reversed(info.namespace) if ref.name]
    parts.append(info.name)
    return "::".join(parts)


class Corpus:
    """All extracted declarations, an index of them, and a list of symbols."""

    def __init__(self, config):
        self.config = config
        self.index = Index()
        self.info_map: dict[bytes, Info] = {}
        self.all_symbols: list[bytes] = []
        self._info_lock = threading.Lock()
        self._symbols_lock = threading.Lock()
        self._is_canonical = False

    @staticmethod
    def global_namespace_id() -> bytes:
        """Return the identifier of the global namespace."""
        return EMPTY_SID

    def global_namespace(self) -> NamespaceInfo:
        """Return the metadata for the global namespace."""
        info = self.get(self.global_namespace_id())
        if not isinstance(info, NamespaceInfo):
            raise TypeError("global namespace entry is not a namespace")
        return info

    def exists(self, usr) -> bool:
        """Return True if a symbol with identifier ``usr`` is present."""
        return self.find(usr) is not None

    def find(self, usr) -> Info | None:
        """Return the symbol with identifier ``usr``, or None."""
        return self.info_map.get(_symbol_id(usr))

    def get(self, usr) -> Info:
        """Return the symbol with identifier ``usr``; raise KeyError if absent."""
        info = self.find(usr)
        if info is None:
            raise KeyError(f"no symbol with id {bytes(usr).hex()}")
        return info

    def insert(self, info: Info) -> None:
        """Add ``info`` to the index and the symbol table.

        May be called from several threads at once.
        """
        if self._is_canonical:
            raise RuntimeError("cannot insert into a canonical corpus")
        self.insert_into_index(info)
        with self._info_lock:
            self.info_map[info.usr] = info

    def insert_into_index(self, info: Info) -> None:
        """Add a reference to ``info`` under its namespaces in the index.

        Missing namespace entries are created; an existing entry for the
        symbol has its empty path and name filled in.
        """
        if self._is_canonical:
            raise RuntimeError("cannot insert into a canonical corpus")
        with self._symbols_lock:
            node = self.index
            for ref in reversed(info.namespace):
                child = node.find_child(ref.usr)
                if child is None:
                    child = Index(ref.usr, ref.name, ref.ref_type, ref.path)
                    node.children.append(child)
                node = child
            existing = node.find_child(info.usr)
            if existing is None:
                node.children.append(Index(info.usr, info.name, info.it, info.path))
            else:
                if not existing.path:
                    existing.path = info.path
                if not existing.name:
                    existing.name = info.name
            self.all_symbols.append(info.usr)

    # ------------------------------------------------------------------

    def _sort_key(self, usr: bytes):
        return _SYMBOL_KEY(_qualified_name(self.get(usr)))

    def _sort_refs(self, refs: list[Reference]) -> None:
        refs.sort(key=lambda ref: self._sort_key(ref.usr))

    def _canonicalize(self, reporter) -> bool:
        """Sort contents by qualified name and compute briefs.

        Returns False, after reporting, if the global namespace is missing.
        """
        if self._is_canonical:
            return True
        root = self.find(EMPTY_SID)
        if not isinstance(root, NamespaceInfo):
            reporter.failed("find global namespace")
            return False
        if self.config.verbose:
            reporter.print("Canonicalizing...")
        self._canonicalize_info(root)
        self.all_symbols.sort(key=self._sort_key)
        self._is_canonical = True
        return True

    def _canonicalize_info(self, info: Info) -> None:
        info.javadoc.calculate_brief()
        if isinstance(info, (NamespaceInfo, RecordInfo)):
            self._canonicalize_scope(info.children)

    def _canonicalize_scope(self, scope: Scope) -> None:
        self._sort_refs(scope.namespaces)
        self._sort_refs(scope.records)
        self._sort_refs(scope.functions)
        for ref in scope.namespaces:
            self._canonicalize_typed(ref.usr, NamespaceInfo)
        for ref in scope.records:
            self._canonicalize_typed(ref.usr, RecordInfo)
        for ref in scope.functions:
            self._canonicalize_typed(ref.usr, FunctionInfo)
        item: EnumInfo | TypedefInfo
        for item in scope.enums:
            item.javadoc.calculate_brief()
        for item in scope.typedefs:
            item.javadoc.calculate_brief()

    def _canonicalize_typed(self, usr: bytes, kind: type) -> None:
        info = self.get(usr)
        if not isinstance(info, kind):
            raise TypeError(f"symbol {usr.hex()} is not a {kind.__name__}")
        self._canonicalize_info(info)