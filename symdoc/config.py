"""Settings used to build the corpus and generate documentation."""

from __future__ import annotations

import os
import posixpath
import stat
from dataclasses import dataclass, field

import yaml

from .errors import make_error


def _to_slash(path: str) -> str:
    return path.replace(os.sep, "/") if os.sep != "/" else path


def _dirsy(path: str) -> str:
    return path if path.endswith("/") else path + "/"


def _is_absolute(path: str) -> bool:
    return posixpath.isabs(path) or os.path.isabs(path)


@dataclass
class _Options:
    verbose: bool = True
    include_private: bool = False
    source_root: str = ""
    includes: list[str] = field(default_factory=list)


def _as_bool(value, key: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"invalid boolean for key '{key}'")
    return value


def _as_string(value, key: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ValueError(f"invalid string for key '{key}'")
    return str(value)


def _parse_options(document) -> _Options:
    opt = _Options()
    if document is None:
        return opt
    if not isinstance(document, dict):
        raise ValueError("document is not a mapping")
    for key, value in document.items():
        if key == "verbose":
            opt.verbose = _as_bool(value, key)
        elif key == "private":
            opt.include_private = _as_bool(value, key)
        elif key == "source-root":
            opt.source_root = _as_string(value, key)
        elif key == "input":
            if value is None:
                continue
            if not isinstance(value, dict):
                raise ValueError("key 'input' is not a mapping")
            for sub_key, sub_value in value.items():
                if sub_key != "include":
                    raise ValueError(f"unknown key '{sub_key}'")
                if sub_value is None:
                    continue
                if not isinstance(sub_value, list):
                    raise ValueError("key 'include' is not a sequence")
                opt.includes = [_as_string(v, "include") for v in sub_value]
        else:
            raise ValueError(f"unknown key '{key}'")
    return opt


class Config:
    """Configuration bound to a directory from which relative paths resolve.

    All stored paths are POSIX style; directories carry a trailing slash.
    """

    def __init__(self, config_dir: str):
        self._config_dir = config_dir
        self._source_root = ""
        self._input_file_includes: list[str] = []
        self.verbose = True
        self.include_private = False
        self.project_name = ""
        self.out_directory = ""
        self.repository_url: str | None = None
        self.ignore_mapping_failures = False

    @property
    def config_dir(self) -> str:
        return self._config_dir

    @property
    def source_root(self) -> str:
        return self._source_root

    @property
    def input_file_includes(self) -> tuple[str, ...]:
        return tuple(self._input_file_includes)

    def _normalize_path(self, path: str) -> str:
        if not _is_absolute(path):
            return posixpath.normpath(posixpath.join(self._config_dir, path))
        return _to_slash(os.path.normpath(path))

    @classmethod
    def create_at_directory(cls, dir_path: str) -> "Config":
        """Return a default configuration for ``dir_path``, made absolute."""
        try:
            absolute = os.path.abspath(dir_path)
        except OSError as exc:
            raise make_error("os.path.abspath('", dir_path, "') returned ", exc) from exc
        return cls(_dirsy(_to_slash(absolute)))

    @classmethod
    def load_from_file(cls, file_path: str) -> "Config":
        """Return a configuration read from the YAML file ``file_path``."""
        file_path = os.fspath(file_path)
        try:
            status = os.stat(file_path)
        except OSError as exc:
            raise make_error("os.stat('", file_path, "') returned ", exc) from exc
        if not stat.S_ISREG(status.st_mode):
            raise make_error("path '", file_path, "' is not a regular file")

        config = cls.create_at_directory(os.path.dirname(file_path))

        try:
            with open(file_path, encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise make_error(exc, " when loading file '", file_path, "' ") from exc
        try:
            opt = _parse_options(yaml.safe_load(text))
        except (yaml.YAMLError, ValueError) as exc:
            raise make_error(exc, " when parsing file '", file_path, "' ") from exc

        config.verbose = opt.verbose
        config.include_private = opt.include_private
        config.set_source_root(opt.source_root)
        config.set_input_file_includes(opt.includes)
        return config

    def should_visit_tu(self, file_path: str) -> bool:
        """Return True if the translation unit at ``file_path`` is wanted."""
        if not self._input_file_includes:
            return True
        return file_path in self._input_file_includes

    def should_visit_file(self, file_path: str) -> str | None:
        """Return the prefix to strip from ``file_path``, or None to skip it."""
        if not self._source_root or not file_path.startswith(self._source_root):
            return None
        return _dirsy(self._source_root)

    def set_source_root(self, dir_path: str) -> None:
        """Set the source root, resolving relative paths against config_dir."""
        self._source_root = _dirsy(self._normalize_path(dir_path))

    def set_input_file_includes(self, paths) -> None:
        """Add translation unit filters, resolving each path."""
        self._input_file_includes.extend(self._normalize_path(p) for p in paths)