"""
C# Syntax Model (Layer 1: Source Text → Structured Tree).

Wraps tree-sitter with the C# grammar behind a small interface:

    parse(source)                           -> SyntaxTree
    find_class(tree)                        -> ClassDeclaration | None
    members(tree, class_node)               -> [Member, ...]
    replace_members(tree, cls, kept)        -> SyntaxTree
    print_tree(tree)                        -> bytes

Parsing never raises. tree-sitter recovers from syntax errors and returns a
best-effort tree; ``SyntaxTree.has_errors`` tells the caller that recovery
happened.

Rewriting splices the original bytes instead of pretty-printing the whole
file: dropped members disappear together with their own-line leading
comments and same-line trailing comments, whitespace around the removal is
tidied, and every other byte (line endings, BOM, indentation) is kept.
"""

from __future__ import annotations

import codecs
import re
import warnings
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Sequence

import tree_sitter_c_sharp as tscsharp
from tree_sitter import Language, Parser

from designer_cleaner.model import ClassDeclaration, Member, MemberKind


UTF8_BOM = codecs.BOM_UTF8

# UTF-32 before UTF-16: the UTF-32 LE mark starts with the UTF-16 LE one.
_BOM_ENCODINGS = [
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
]

CS_LANGUAGE = Language(tscsharp.language())

_parser = Parser(CS_LANGUAGE)

_EAT_LINE_END = re.compile(rb"\A[ \t]*\r?\n")
_EXTRA_BLANK_LINES = re.compile(rb"(\r?\n)(?:[ \t]*\r?\n){2,}")
_LEADING_BLANK_LINES = re.compile(rb"\A([ \t]*\r?\n)(?:[ \t]*\r?\n)+")
_TRAILING_BLANK_LINES = re.compile(rb"(\r?\n)(?:[ \t]*\r?\n)+([ \t]*)\Z")


class SyntaxErrorWarning(UserWarning):
    """Emitted when a source file only parsed with error recovery."""
    pass


@dataclass
class SyntaxTree:
    """
    A parsed C# source file.

    Properties:
        source: UTF-8 bytes the tree was parsed from (without BOM)
        tree: tree-sitter Tree
        bom: the byte-order mark stripped from the original bytes, if any
        encoding: encoding of the original bytes, taken from the BOM
    """

    source: bytes
    tree: Any
    bom: bytes = b""
    encoding: str = "utf-8"

    @property
    def root(self):
        return self.tree.root_node

    @property
    def has_errors(self) -> bool:
        return self.tree.root_node.has_error


def node_text(node, src: bytes) -> str:
    """Return the source text for a tree-sitter node."""
    return src[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def walk(node, *node_types) -> Iterator[Any]:
    """
    Yield descendant nodes (including self) of the given types, pre-order.

    Iterative: long concatenations nest deeper than the recursion limit.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type in node_types:
            yield current
        stack.extend(reversed(current.children))


def parse(source: bytes) -> SyntaxTree:
    """
    Parse C# source bytes. Never raises on malformed code.

    A UTF-16 or UTF-32 file (recognized by its BOM) is decoded and parsed as
    UTF-8; ``print_tree`` encodes it back.

    Raises:
        UnicodeDecodeError: If the bytes don't match the encoding their BOM names
    """
    for bom, encoding in _BOM_ENCODINGS:
        if source.startswith(bom):
            source = source[len(bom):]
            if encoding != "utf-8":
                source = source.decode(encoding).encode("utf-8")
            return SyntaxTree(source=source, tree=_parser.parse(source), bom=bom, encoding=encoding)
    return SyntaxTree(source=source, tree=_parser.parse(source))


def parse_text(text: str) -> SyntaxTree:
    return parse(text.encode("utf-8"))


def warn_if_broken(tree: SyntaxTree, label: str) -> None:
    """Warn (once per call) that analysis of ``label`` is best-effort."""
    if tree.has_errors:
        warnings.warn(
            f"{label} contains syntax errors; analysis is best-effort",
            SyntaxErrorWarning,
            stacklevel=2,
        )


def print_tree(tree: SyntaxTree) -> bytes:
    """Serialize a tree back to file bytes, in the encoding it was read with."""
    if tree.encoding == "utf-8":
        return tree.bom + tree.source
    return tree.bom + tree.source.decode("utf-8").encode(tree.encoding)


# =============================================================================
# MEMBER EXTRACTION
# =============================================================================


def _is_trivia(node) -> bool:
    return node.type == "comment" or node.type.startswith("preproc")


def _declarator_name(declarator, src: bytes) -> Optional[str]:
    name_node = declarator.child_by_field_name("name")
    if name_node is None:
        name_node = next((c for c in declarator.children if c.type == "identifier"), None)
    return node_text(name_node, src).strip() if name_node is not None else None


def _field_variables(field_node, src: bytes) -> List[str]:
    names = []
    for declaration in field_node.children:
        if declaration.type != "variable_declaration":
            continue
        for declarator in declaration.children:
            if declarator.type != "variable_declarator":
                continue
            name = _declarator_name(declarator, src)
            if name:
                names.append(name)
    return names


def _field_type(field_node, src: bytes) -> Optional[str]:
    for declaration in field_node.children:
        if declaration.type == "variable_declaration":
            type_node = declaration.child_by_field_name("type")
            if type_node is not None:
                return node_text(type_node, src).strip()
    return None


def _to_member(node, src: bytes) -> Member:
    line = node.start_point[0] + 1

    if node.type == "property_declaration":
        name_node = node.child_by_field_name("name")
        type_node = node.child_by_field_name("type")
        if name_node is not None:
            return Member(
                kind=MemberKind.PROPERTY,
                names=(node_text(name_node, src).strip(),),
                type_name=node_text(type_node, src).strip() if type_node is not None else None,
                line=line,
                node=node,
            )

    elif node.type == "field_declaration":
        return Member(
            kind=MemberKind.FIELD,
            names=tuple(_field_variables(node, src)),
            type_name=_field_type(node, src),
            line=line,
            node=node,
        )

    return Member(kind=MemberKind.OTHER, line=line, node=node)


def members(tree: SyntaxTree, class_node) -> List[Member]:
    """
    Ordered member list of a class node. Comments and directives are not members.

    Declarations inside a conditional compilation block (``#if`` ... ``#endif``)
    belong to the directive node, not to the class body, so they are not
    listed here and a rewrite never touches them. Which branch compiles
    depends on symbols this tool does not know.
    """
    body = class_node.child_by_field_name("body")
    if body is None:
        return []
    return [
        _to_member(child, tree.source)
        for child in body.children
        if child.is_named and not _is_trivia(child)
    ]


def find_class(tree: SyntaxTree) -> Optional[ClassDeclaration]:
    """Return the first class declaration of the file, or None."""
    for node in walk(tree.root, "class_declaration"):
        name_node = node.child_by_field_name("name")
        return ClassDeclaration(
            name=node_text(name_node, tree.source).strip() if name_node is not None else "",
            members=members(tree, node),
            line=node.start_point[0] + 1,
            node=node,
        )
    return None


def property_names(tree: SyntaxTree) -> List[str]:
    """Every property name declared anywhere in the file, unique, in document order."""
    names = {}
    for node in walk(tree.root, "property_declaration"):
        name_node = node.child_by_field_name("name")
        if name_node is not None:
            names.setdefault(node_text(name_node, tree.source).strip(), None)
    return list(names)


def field_variable_names(tree: SyntaxTree) -> List[str]:
    """Every variable bound by a field declaration anywhere in the file."""
    names = {}
    for node in walk(tree.root, "field_declaration"):
        for name in _field_variables(node, tree.source):
            names.setdefault(name, None)
    return list(names)


# =============================================================================
# REWRITING
# =============================================================================


def _own_line(src: bytes, start: int) -> bool:
    line_start = src.rfind(b"\n", 0, start) + 1
    return not src[line_start:start].strip()


def _attached_trivia(items: Sequence[Any], index: int, src: bytes) -> List[Any]:
    """
    Comments that belong to the member at ``items[index]``.

    Leading: own-line comments directly above it, with no blank line in
    between. Trailing: comments starting on the member's last line.
    """
    attached = []
    member = items[index]

    following = member
    i = index - 1
    while i >= 0 and items[i].type == "comment":
        comment = items[i]
        if not _own_line(src, comment.start_byte):
            break
        if src[comment.end_byte:following.start_byte].count(b"\n") > 1:
            break
        attached.append(comment)
        following = comment
        i -= 1

    i = index + 1
    while i < len(items) and items[i].type == "comment":
        if items[i].start_point[0] != member.end_point[0]:
            break
        attached.append(items[i])
        i += 1

    return attached


def _tidy_gap(gap: bytes, leading: bool, trailing: bool) -> bytes:
    gap = _EXTRA_BLANK_LINES.sub(rb"\1\1", gap)
    if leading:
        gap = _LEADING_BLANK_LINES.sub(rb"\1", gap)
    if trailing:
        gap = _TRAILING_BLANK_LINES.sub(rb"\1\2", gap)
    return gap


def _item_end(src: bytes, item) -> int:
    """End of an item, excluding the line break that directive nodes include."""
    end = item.end_byte
    while end > item.start_byte and src[end - 1:end] in (b"\n", b"\r"):
        end -= 1
    return end


def _splice_body(src: bytes, body, drop_ids: set) -> bytes:
    children = body.children
    open_end = next((c.end_byte for c in children if c.type == "{"), body.start_byte)
    close_start = next(
        (c.start_byte for c in reversed(children) if c.type == "}"), body.end_byte
    )
    items = [c for c in children if c.type not in ("{", "}")]

    for index, item in enumerate(items):
        if item.id in drop_ids and not _is_trivia(item):
            drop_ids.update(c.id for c in _attached_trivia(items, index, src))

    pieces = [src[:open_end]]
    cursor = open_end
    gap = b""
    changed = False
    eat_line_end = False
    emitted = False

    for item in items:
        segment = src[cursor:item.start_byte]
        cursor = _item_end(src, item)
        if eat_line_end:
            segment = _EAT_LINE_END.sub(b"", segment, count=1)
            eat_line_end = False
        gap += segment

        if item.id in drop_ids:
            gap = gap.rstrip(b" \t")
            eat_line_end = gap.endswith(b"\n")
            changed = True
            continue

        pieces.append(_tidy_gap(gap, leading=not emitted, trailing=False) if changed else gap)
        pieces.append(src[item.start_byte:cursor])
        gap = b""
        changed = False
        emitted = True

    segment = src[cursor:close_start]
    if eat_line_end:
        segment = _EAT_LINE_END.sub(b"", segment, count=1)
    gap += segment
    pieces.append(_tidy_gap(gap, leading=not emitted, trailing=True) if changed else gap)
    pieces.append(src[close_start:])
    return b"".join(pieces)


def replace_members(
    tree: SyntaxTree, designer_class: ClassDeclaration, kept: Sequence[Member]
) -> SyntaxTree:
    """
    Return a new tree whose class holds only the ``kept`` members.

    ``kept`` must be a subsequence of the class's own members; relative order
    is always the original order.
    """
    class_ids = {m.node.id for m in designer_class.members}
    kept_ids = set()
    for member in kept:
        if member.node is None or member.node.id not in class_ids:
            raise ValueError(f"Member {member.name or member.kind.value!r} does not belong to class {designer_class.name!r}")
        kept_ids.add(member.node.id)

    drop_ids = class_ids - kept_ids
    if not drop_ids:
        return tree

    body = designer_class.node.child_by_field_name("body")
    source = _splice_body(tree.source, body, set(drop_ids))
    return SyntaxTree(
        source=source, tree=_parser.parse(source), bom=tree.bom, encoding=tree.encoding
    )


__all__ = [
    "CS_LANGUAGE",
    "SyntaxErrorWarning",
    "SyntaxTree",
    "parse",
    "parse_text",
    "warn_if_broken",
    "print_tree",
    "find_class",
    "members",
    "property_names",
    "field_variable_names",
    "replace_members",
]
