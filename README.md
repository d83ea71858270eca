# anchor

A small command-line toolkit for working with single files:

- **cat**: print a file's contents.
- **hash**: print the MD5, SHA1, SHA256 and SHA512 digests of a file.
- **fmt**: reformat a JSON, XML, YAML (`.yml`) or Markdown (`.md`) file in place.

When stderr is a terminal, a spinner is drawn while a command runs. When the
command finishes, it prints its report and then how long it took.

## Installation

```
pip install .
```

## Usage

Show a file. Bytes that are not valid UTF-8 are replaced:

```
anchor cat --file notes.txt
```

Hash a file:

```
anchor hash --file archive.tar.gz
```

Hash a file and also write the report to `hash_log.txt` in the current
directory. With `--debug` (or `-d`), anchor also reports whether the log file
could be created, read and written:

```
anchor hash --file archive.tar.gz --debug
```

Without `--debug`, the report ends with a hint on how to turn it on.

For `cat` and `hash`, a path that does not exist or is a directory is reported
and nothing else is done.

Format a file in place. The file type comes from its extension, which is
matched exactly (`json`, `xml`, `yml`, `md`):

```
anchor fmt --file config.json
anchor fmt --file layout.xml
anchor fmt --file settings.yml
anchor fmt --file README.md
```

What each format does:

- **JSON**: pretty-printed with two-space indentation and keys sorted.
  `NaN` and `Infinity` are rejected.
- **XML**: markup re-indented by four spaces, an XML declaration rewritten as
  `<?xml version="1.0" encoding="UTF-8"?>`, and the result checked for
  well-formedness before it is written; a syntax error is reported with its
  line and column.
- **YAML**: a single document rewritten in block style, keys kept in their
  order. Files with more than one document are refused.
- **Markdown**: rendered to HTML and back to Markdown, which normalises
  headings, lists, emphasis, links and code blocks. Empty files are skipped.

Files with any other extension are skipped with a message. A file that cannot
be read or parsed is reported and left unchanged.

## Using it from Python

The building blocks can be imported as well:

```python
from anchor.hashing import check_sha256
from anchor.formats import auto_formats_file, file_type_for, FileType

print(check_sha256("archive.tar.gz"))
print(file_type_for("config.json") is FileType.JSON)
print(auto_formats_file("config.json"))
```

The functions return report text tagged with a coloured `[INFO]`, `[ERR]` or
`[SUCCESS]` badge (see `anchor.styles.LogLevel`) instead of raising.
`anchor.cli.main` runs the command line and accepts an argument list.

## Limitations

- Formatted output is written over the start of the existing file without
  truncating it. If the formatted text is shorter than the original, the
  leftover bytes of the original remain at the end of the file.
- Only the `.yml` extension is recognised for YAML; `.yaml` files are skipped.
- There is no recursive or multi-file mode: each command works on one file.

## Running the tests

```
pip install .[test]
pytest
```