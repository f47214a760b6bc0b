"""
TypeScript front end built on tree-sitter.

Turns source text into a tree-sitter tree and exposes the traversal the checkers rely on:
every type reference in pre-order, outer references before the ones nested in their
argument lists.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

from ts_generic_lint.exceptions import MalformedNodeError, SourceParseError, TsGenericLintException
from ts_generic_lint.nodes import SourceRange, TypeNode, TypeReferenceNode

_logger = logging.getLogger(__name__)

TYPESCRIPT = "typescript"
TSX = "tsx"

LANGUAGES = {
    TYPESCRIPT: Language(tree_sitter_typescript.language_typescript()),
    TSX: Language(tree_sitter_typescript.language_tsx()),
}

SOURCE_SUFFIXES = (".ts", ".tsx", ".mts", ".cts")

# Parents whose `name` field declares a type instead of referencing one.
_DECLARATION_PARENTS = frozenset(
    [
        "type_alias_declaration",
        "interface_declaration",
        "class_declaration",
        "abstract_class_declaration",
        "class",
        "type_parameter",
        "mapped_type_clause",
    ]
)

# `interface A extends B` / `class C implements D`: heritage heads, not type references.
_HERITAGE_CLAUSES = frozenset(["extends_type_clause", "implements_clause"])

_REFERENCE_KINDS = frozenset(["type_identifier", "nested_type_identifier", "generic_type"])


def dialect_for_path(path: str) -> str:
    return TSX if str(path).endswith(".tsx") else TYPESCRIPT


def line_col(data: bytes, offset: int) -> tuple[int, int]:
    """Returns the 1-based line and 0-based character column of a byte offset."""
    line_start = data.rfind(b"\n", 0, offset) + 1
    lineno = data.count(b"\n", 0, offset) + 1
    return lineno, len(data[line_start:offset].decode("utf-8", errors="replace"))


def _iter_nodes(root: Node) -> Iterator[tuple[Node, str | None]]:
    cursor = root.walk()
    while True:
        yield cursor.node, cursor.field_name
        if cursor.goto_first_child():
            continue
        if cursor.goto_next_sibling():
            continue
        while True:
            if not cursor.goto_parent():
                return
            if cursor.goto_next_sibling():
                break


def _first_syntax_error(root: Node) -> Node | None:
    for node, _ in _iter_nodes(root):
        if node.is_error or node.is_missing:
            return node
    return None


def parse(source: str, dialect: str = TYPESCRIPT) -> Tree:
    """
    Parses TypeScript (or TSX) source.

    Raises:
        SourceParseError: If the source contains syntax errors.
    """
    if dialect not in LANGUAGES:
        raise TsGenericLintException.invalid_parameter_value(
            f"Unknown dialect {dialect!r}. Supported dialects: {', '.join(sorted(LANGUAGES))}"
        )
    data = source.encode("utf-8")
    tree = Parser(LANGUAGES[dialect]).parse(data)
    _logger.debug("Parsed %d bytes as %s", len(data), dialect)
    if tree.root_node.has_error:
        bad = _first_syntax_error(tree.root_node) or tree.root_node
        lineno, col_offset = line_col(data, bad.start_byte)
        what = f"missing {bad.type}" if bad.is_missing else "unexpected syntax"
        raise SourceParseError(
            f"Parsing error at {lineno}:{col_offset}: {what}", lineno=lineno, col_offset=col_offset
        )
    return tree


def _range(node: Node) -> SourceRange:
    return SourceRange(start=node.start_byte, end=node.end_byte)


def _text(node: Node) -> str:
    return "".join(node.text.decode("utf-8").split())


def _named(node: Node) -> list[Node]:
    return [child for child in node.named_children if child.type != "comment"]


def _type_node(node: Node) -> TypeNode:
    while node.type == "parenthesized_type" and _named(node):
        node = _named(node)[0]
    if node.type in _REFERENCE_KINDS:
        return _reference(node)
    return TypeNode(kind=node.type, source_range=_range(node))


def _reference(node: Node) -> TypeReferenceNode:
    if node.type != "generic_type":
        return TypeReferenceNode.create(name=_text(node), name_range=_range(node))

    name = node.child_by_field_name("name")
    arguments = node.child_by_field_name("type_arguments")
    if name is None or arguments is None:
        raise MalformedNodeError(
            f"generic_type at byte {node.start_byte} lacks a name or type arguments"
        )
    return TypeReferenceNode.create(
        name=_text(name),
        name_range=_range(name),
        type_arguments=tuple(_type_node(arg) for arg in _named(arguments)),
        source_range=_range(node),
    )


def _is_type_reference(node: Node, field_name: str | None) -> bool:
    if node.type not in _REFERENCE_KINDS:
        return False
    parent = node.parent
    if parent is None:
        return False
    if parent.type in _HERITAGE_CLAUSES:
        return False
    if node.type == "generic_type":
        return True
    if parent.type in ("generic_type", "nested_type_identifier"):
        return False
    if field_name == "name" and parent.type in _DECLARATION_PARENTS:
        return False
    if parent.type == "infer_type":
        # `infer U extends C`: U is declared here, C is an ordinary reference.
        return node.start_byte != _named(parent)[0].start_byte
    return True


def iter_type_references(tree: Tree) -> Iterator[TypeReferenceNode]:
    for node, field_name in _iter_nodes(tree.root_node):
        if _is_type_reference(node, field_name):
            yield _reference(node)


def iter_comments(tree: Tree) -> Iterator[tuple[int, str]]:
    """Yields ``(lineno, text)`` for every comment; ``lineno`` is 1-based."""
    for node, _ in _iter_nodes(tree.root_node):
        if node.type == "comment":
            yield node.start_point[0] + 1, node.text.decode("utf-8")
