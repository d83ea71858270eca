"""Detect a file's format from its extension and rewrite it formatted."""

from __future__ import annotations

import json
import re
import xml.parsers.expat
from dataclasses import dataclass, field
from enum import Enum
from html.parser import HTMLParser
from typing import Iterator, Union

import markdown
import yaml

from anchor.extensions import get_file_ext
from anchor.fileops import write_file
from anchor.styles import LogLevel


def _error(message: str) -> str:
    return f"{LogLevel.ERROR.fmt()} {message}"


class FileType(Enum):
    """The formats that can be rewritten, chosen by file extension."""

    JSON = "json"
    XML = "xml"
    YAML = "yml"
    MARKDOWN = "md"
    UNKNOWN = "unknown"

    def format_file(self, file_path: str) -> str:
        """Format the file in place and return a styled report."""
        if self is FileType.JSON:
            return json_formatter(file_path)
        if self is FileType.XML:
            return format_xml(file_path)
        if self is FileType.YAML:
            return yaml_fmt(file_path)
        if self is FileType.MARKDOWN:
            return markdown_format(file_path)
        return "Unknow file extension, skipping.."


_EXTENSIONS = {
    "json": FileType.JSON,
    "xml": FileType.XML,
    "yml": FileType.YAML,
    "md": FileType.MARKDOWN,
}


def file_type_for(file_path: str) -> FileType:
    """Return the file type that the path's extension names."""
    return _EXTENSIONS.get(get_file_ext(file_path), FileType.UNKNOWN)


def auto_formats_file(file_path: str) -> str:
    """Format the file according to its extension."""
    return file_type_for(file_path).format_file(file_path)


# --- JSON -----------------------------------------------------------------


def _reject_constant(name: str) -> float:
    raise ValueError(f"invalid number {name}")


def json_formatter(file_path: str) -> str:
    """Rewrite a JSON file pretty-printed with two-space indentation."""
    try:
        with open(file_path, "rb") as handle:
            raw = handle.read()
    except OSError as error:
        return _error(f"Cannot open file with error: {error}\n")
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as error:
        return _error(f"Cannot resolve file not UTF-8: {error}\n")
    try:
        value = json.loads(text, parse_constant=_reject_constant)
    except ValueError as error:
        return _error(f"Cannot parser JSON with error: {error}\n")
    try:
        pretty = json.dumps(value, indent=2, sort_keys=True, ensure_ascii=False)
    except (TypeError, ValueError) as error:
        return _error(f"Cannot format JSON file with error: {error}\n")
    return write_file(file_path, pretty, "Successfully format JSON file!")


# --- XML ------------------------------------------------------------------


class _XmlKind(Enum):
    TEXT = "text"
    START = "start"
    END = "end"
    EMPTY = "empty"
    COMMENT = "comment"
    CDATA = "cdata"
    DECL = "decl"
    PI = "pi"
    DOCTYPE = "doctype"


_XML_DECL = re.compile(r"xml(?:\s|$)")
_INDENT = " " * 4
_CANONICAL_DECL = '<?xml version="1.0" encoding="UTF-8"?>'


def _find_tag_end(source: str, start: int) -> int:
    """Index of the '>' closing a tag, skipping quoted attribute values."""
    quote = None
    for index in range(start, len(source)):
        char = source[index]
        if quote:
            if char == quote:
                quote = None
        elif char in "\"'":
            quote = char
        elif char == ">":
            return index
    return -1


def _find_doctype_end(source: str, start: int) -> int:
    """Index of the '>' closing a DOCTYPE, allowing an internal subset."""
    depth = 0
    for index in range(start, len(source)):
        char = source[index]
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        elif char == ">" and depth <= 0:
            return index
    return -1


def _xml_events(source: str) -> Iterator[tuple[_XmlKind, str]]:
    """Yield raw XML events; stop quietly at the first malformed construct."""
    position = 0
    open_tags: list[str] = []
    length = len(source)
    while position < length:
        if source[position] != "<":
            end = source.find("<", position)
            if end == -1:
                end = length
            yield _XmlKind.TEXT, source[position:end]
            position = end
        elif source.startswith("<!--", position):
            end = source.find("-->", position + 4)
            if end == -1:
                return
            yield _XmlKind.COMMENT, source[position + 4 : end]
            position = end + 3
        elif source.startswith("<![CDATA[", position):
            end = source.find("]]>", position + 9)
            if end == -1:
                return
            yield _XmlKind.CDATA, source[position + 9 : end]
            position = end + 3
        elif source[position : position + 9].upper() == "<!DOCTYPE":
            end = _find_doctype_end(source, position + 9)
            if end == -1:
                return
            yield _XmlKind.DOCTYPE, source[position + 9 : end].lstrip()
            position = end + 1
        elif source.startswith("<!", position):
            return
        elif source.startswith("<?", position):
            end = source.find("?>", position + 2)
            if end == -1:
                return
            body = source[position + 2 : end]
            kind = _XmlKind.DECL if _XML_DECL.match(body) else _XmlKind.PI
            yield kind, body
            position = end + 2
        elif source.startswith("</", position):
            end = source.find(">", position + 2)
            if end == -1:
                return
            name = source[position + 2 : end].rstrip()
            if not open_tags or open_tags.pop() != name:
                return
            yield _XmlKind.END, name
            position = end + 1
        else:
            end = _find_tag_end(source, position + 1)
            if end == -1:
                return
            body = source[position + 1 : end]
            if body.endswith("/"):
                yield _XmlKind.EMPTY, body[:-1]
            else:
                name = body.split(None, 1)[0] if body.strip() else ""
                open_tags.append(name)
                yield _XmlKind.START, body
            position = end + 1


def _render_xml_event(kind: _XmlKind, body: str) -> str:
    if kind is _XmlKind.START:
        return f"<{body}>"
    if kind is _XmlKind.END:
        return f"</{body}>"
    if kind is _XmlKind.EMPTY:
        return f"<{body}/>"
    if kind is _XmlKind.COMMENT:
        return f"<!--{body}-->"
    if kind is _XmlKind.CDATA:
        return f"<![CDATA[{body}]]>"
    if kind is _XmlKind.DECL:
        return _CANONICAL_DECL
    if kind is _XmlKind.PI:
        return f"<?{body}?>"
    if kind is _XmlKind.DOCTYPE:
        return f"<!DOCTYPE {body}>"
    return body


def _indent_xml(source: str) -> str:
    """Re-emit XML, breaking and indenting before markup that follows markup.

    Text is kept exactly; markup right after text is not moved to a new line.
    """
    pieces: list[str] = []
    level = 0
    line_break = False
    for kind, body in _xml_events(source):
        if kind is _XmlKind.TEXT:
            pieces.append(body)
            line_break = False
            continue
        if kind is _XmlKind.END:
            level = max(level - 1, 0)
        if line_break:
            pieces.append("\n" + _INDENT * level)
        pieces.append(_render_xml_event(kind, body))
        if kind is _XmlKind.START:
            level += 1
        line_break = kind is not _XmlKind.CDATA
    return "".join(pieces)


def _xml_syntax_error(xml_content: str) -> str | None:
    parser = xml.parsers.expat.ParserCreate()
    try:
        parser.Parse(xml_content.encode("utf-8"), True)
    except xml.parsers.expat.ExpatError as error:
        reason = xml.parsers.expat.ErrorString(error.code)
        return _error(
            f"XML syntax error at line {error.lineno}, "
            f"column {error.offset + 1}: {reason}"
        )
    return None


def format_xml(file_path: str) -> str:
    """Rewrite an XML file indented by four spaces, checking its syntax."""
    try:
        with open(file_path, "rb") as handle:
            raw = handle.read()
    except OSError as error:
        return _error(f"Cannot open file with error {error}")
    try:
        source = raw.decode("utf-8")
    except UnicodeDecodeError as error:
        return _error(f"Cannot convert XML content to UTF-8: {error}")
    xml_content = _indent_xml(source)
    syntax_error = _xml_syntax_error(xml_content)
    if syntax_error is not None:
        return syntax_error
    return write_file(file_path, xml_content, "Successfully format XML file!")


# --- YAML -----------------------------------------------------------------

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"
_BOOL_TAG = "tag:yaml.org,2002:bool"


class _Loader(yaml.SafeLoader):
    """Safe loader that keeps dates as strings and reads only true/false as booleans."""


_Loader.yaml_implicit_resolvers = {
    first: [
        (tag, pattern)
        for tag, pattern in resolvers
        if tag not in (_TIMESTAMP_TAG, _BOOL_TAG)
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_Loader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def yaml_fmt(file_path: str) -> str:
    """Rewrite a single-document YAML file in block style."""
    try:
        with open(file_path, encoding="utf-8") as handle:
            source = handle.read()
    except (OSError, UnicodeDecodeError) as error:
        return _error(f"Cannot open file with error: {error}")
    try:
        documents = list(yaml.load_all(source, Loader=_Loader))
    except yaml.YAMLError as error:
        return _error(f"YAML syntax error: {error}")
    if len(documents) > 1:
        return _error(
            "Cannot get YAML value with error deserializing from YAML "
            "containing more than one document is not supported"
        )
    value = documents[0] if documents else None
    try:
        formatted = yaml.dump(
            value,
            Dumper=yaml.SafeDumper,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
    except yaml.YAMLError as error:
        return _error(f"Cannot format YAML file with error: {error}")
    if formatted.endswith("\n...\n"):
        formatted = formatted[: -len("...\n")]
    return write_file(file_path, formatted, "Successfully format YAML file!")


# --- Markdown -------------------------------------------------------------


@dataclass
class _Node:
    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: list[Union["_Node", str]] = field(default_factory=list)


class _TreeBuilder(HTMLParser):
    """Build a small element tree from HTML."""

    _VOID = frozenset({"br", "hr", "img", "input", "meta", "link"})

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.root = _Node("root")
        self._stack = [self.root]

    def handle_starttag(self, tag, attrs):
        node = _Node(tag, {key: value or "" for key, value in attrs})
        self._stack[-1].children.append(node)
        if tag not in self._VOID:
            self._stack.append(node)

    def handle_startendtag(self, tag, attrs):
        node = _Node(tag, {key: value or "" for key, value in attrs})
        self._stack[-1].children.append(node)

    def handle_endtag(self, tag):
        for depth in range(len(self._stack) - 1, 0, -1):
            if self._stack[depth].tag == tag:
                del self._stack[depth:]
                return

    def handle_data(self, data):
        self._stack[-1].children.append(data)


_WHITESPACE = re.compile(r"\s+")
_BLANK_RUNS = re.compile(r"\n{3,}")
_HEADINGS = {f"h{level}": level for level in range(1, 7)}
_BLOCK_CONTAINERS = frozenset({"root", "ul", "ol", "blockquote"})


def _text_of(node: _Node | str) -> str:
    if isinstance(node, str):
        return node
    return "".join(_text_of(child) for child in node.children)


def _tidy(text: str) -> str:
    return _BLANK_RUNS.sub("\n\n", text).strip("\n")


def _render_children(node: _Node) -> str:
    in_block = node.tag in _BLOCK_CONTAINERS
    parts = []
    for child in node.children:
        if isinstance(child, str):
            if in_block and not child.strip():
                continue
            parts.append(_WHITESPACE.sub(" ", child))
        else:
            parts.append(_render_node(child))
    return "".join(parts)


def _render_list(node: _Node) -> str:
    ordered = node.tag == "ol"
    start = int(node.attrs.get("start", "1") or "1") if ordered else 1
    items = [child for child in node.children if isinstance(child, _Node) and child.tag == "li"]
    lines = []
    for number, item in enumerate(items, start):
        marker = f"{number}. " if ordered else "* "
        body = _tidy(_render_children(item)).strip()
        padding = " " * len(marker)
        body_lines = body.split("\n")
        lines.append(marker + body_lines[0])
        lines.extend(padding + line if line else "" for line in body_lines[1:])
    return "\n\n" + "\n".join(lines) + "\n\n"


def _render_node(node: _Node) -> str:
    tag = node.tag
    if tag in _HEADINGS:
        level = _HEADINGS[tag]
        title = _render_children(node).strip()
        if level == 1:
            return f"\n\n{title}\n==========\n\n"
        if level == 2:
            return f"\n\n{title}\n----------\n\n"
        return f"\n\n{'#' * level} {title}\n\n"
    if tag in ("p", "div"):
        return f"\n\n{_render_children(node).strip()}\n\n"
    if tag in ("em", "i"):
        return f"*{_render_children(node)}*"
    if tag in ("strong", "b"):
        return f"**{_render_children(node)}**"
    if tag == "code":
        return f"`{_text_of(node)}`"
    if tag == "pre":
        code = _text_of(node).rstrip("\n")
        return f"\n\n```\n{code}\n```\n\n"
    if tag == "a":
        href = node.attrs.get("href", "")
        title = node.attrs.get("title")
        target = f'{href} "{title}"' if title else href
        return f"[{_render_children(node)}]({target})"
    if tag == "img":
        return f"![{node.attrs.get('alt', '')}]({node.attrs.get('src', '')})"
    if tag == "br":
        return "  \n"
    if tag == "hr":
        return "\n\n---\n\n"
    if tag in ("ul", "ol"):
        return _render_list(node)
    if tag == "blockquote":
        body = _tidy(_render_children(node))
        quoted = "\n".join(f"> {line}" if line else ">" for line in body.split("\n"))
        return f"\n\n{quoted}\n\n"
    return _render_children(node)


def _html_to_markdown(html: str) -> str:
    builder = _TreeBuilder()
    builder.feed(html)
    builder.close()
    return _tidy(_render_children(builder.root))


def markdown_format(file_path: str) -> str:
    """Normalise a Markdown file by rendering it to HTML and back."""
    try:
        with open(file_path, encoding="utf-8") as handle:
            source = handle.read()
    except (OSError, UnicodeDecodeError) as error:
        return _error(f"Cannot read Markdown source with error: {error}")
    if not source.strip():
        return _error("Markdown source is empty, skipping formatting.")
    html = markdown.markdown(source)
    formatted = _html_to_markdown(html)
    return write_file(file_path, formatted, "Successfully formatted Markdown source!")