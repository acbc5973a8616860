# symdoc

`symdoc` holds the in-memory model that a documentation generator for
C and C++ code builds from the declarations it extracts. It is a
library only and has no command-line entry point.

## What is in the package

- **Configuration**: `symdoc.config.Config`. It loads settings from a
  YAML file (`Config.load_from_file`) or starts from defaults for a
  directory (`Config.create_at_directory`). Relative paths are resolved
  against `config_dir`. `should_visit_tu` and `should_visit_file`
  decide which translation units and files are wanted.
- **Doc comments**: `symdoc.javadoc`. This is a typed tree of `Text`,
  `StyledText`, `Paragraph`, `Brief`, `Admonition`, `Code`, `Param`,
  `TParam` and `Returns` nodes, collected in a `Javadoc`.
  `Javadoc.calculate_brief()` moves the first `Brief` out of the blocks
  into `brief`. If there is no `Brief`, it uses the first `Paragraph`.
- **Symbol metadata**: `symdoc.refs` and `symdoc.info`. These cover
  20-byte symbol ids (`EMPTY_SID` is the global namespace), `Reference`,
  `Location`, templates, `TypeInfo` and `FieldTypeInfo`, and the `Index`
  tree. They also cover `NamespaceInfo`, `RecordInfo`, `BaseRecordInfo`,
  `FunctionInfo`, `EnumInfo`, `TypedefInfo`, `MemberTypeInfo` and
  `Scope`.
- **Corpus**: `symdoc.corpus.Corpus`. This is a table of symbols keyed
  by id, with a namespace `index` and an `all_symbols` list. The
  function `symbol_compare` gives the listing order. Names are first
  compared without regard to ASCII case. If they are equal that way,
  lowercase comes before uppercase.
- **Diagnostics**: `symdoc.reporter.Reporter` and `symdoc.errors`.
  `Reporter` prints messages and counts failures to produce an exit
  code. `make_error` returns a `DocError` whose text includes the
  caller's file and line.

## Installation

```
pip install symdoc
```

## Configuration file

```yaml
verbose: true
private: false
source-root: ../src
input:
  include:
    - ../src/main.cpp
```

Keys other than these make `load_from_file` raise `DocError`. An
unreadable or malformed file does the same.

```python
from symdoc.config import Config

config = Config.load_from_file("docs/symdoc.yml")
config.source_root           # absolute, POSIX style, trailing "/"
config.input_file_includes   # resolved include paths
config.should_visit_tu(path)     # True if no includes are set or path is one of them
config.should_visit_file(path)   # the source root prefix if path is under it, else None
```

## Building a corpus

```python
from symdoc.config import Config
from symdoc.corpus import Corpus, symbol_compare
from symdoc.info import NamespaceInfo

config = Config.create_at_directory(".")
corpus = Corpus(config)
corpus.insert(NamespaceInfo(Corpus.global_namespace_id()))

corpus.exists(Corpus.global_namespace_id())   # True
corpus.global_namespace()                     # the NamespaceInfo just inserted
corpus.get(b"\x01" * 20)                      # raises KeyError

symbol_compare("apple", "Banana")             # True
symbol_compare("a", "A")                      # True
```

`Corpus.insert` adds a symbol to the table and places a reference to it
in the index under its enclosing namespaces. Namespace entries that are
missing are created.

## Reporting

```python
import sys
from symdoc.reporter import Reporter

reporter = Reporter(sys.stdout, sys.stderr)
reporter.print("Collected ", 3, " symbols")   # Collected 3 symbols
reporter.failed("open file ", "x.cpp")        # error: Couldn't open file x.cpp.
reporter.error(ValueError("bad"), "parse")    # error: Couldn't parse because bad.  -> True
reporter.exit_code()                          # 1
```

## What it does not do

`symdoc` does not read or parse C or C++ source code, and it does not
read serialized symbol data. It does not write documentation in any
output format, and it has no command to run. Callers build the metadata
objects themselves and insert them into a `Corpus`.

## Running the tests

```
pip install -e ".[test]"
pytest
```