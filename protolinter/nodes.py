"""Syntax tree of a Protocol Buffer file and its traversal."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator


@dataclass(frozen=True)
class Position:
    """A location inside a source file."""

    filename: str = ""
    offset: int = 0
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


@dataclass(kw_only=True)
class Comment:
    """A comment, kept with its raw text including the comment markers."""

    raw: str = ""
    pos: Position = field(default_factory=Position)


@dataclass(kw_only=True)
class ProtoMeta:
    """Information about the parsed file itself."""

    filename: str = ""


@dataclass(kw_only=True)
class _Node:
    comments: list[Comment] = field(default_factory=list)
    inline_comment: Comment | None = None
    pos: Position = field(default_factory=Position)

    _visit = ""

    def _children(self) -> Iterable[Any]:
        return ()

    def _attached_comments(self) -> Iterator[Comment]:
        yield from self.comments
        if self.inline_comment is not None:
            yield self.inline_comment


@dataclass(kw_only=True)
class _BlockNode(_Node):
    body: list[Any] = field(default_factory=list)
    inline_comment_behind_left_curly: Comment | None = None

    def _children(self) -> Iterable[Any]:
        return self.body

    def _attached_comments(self) -> Iterator[Comment]:
        yield from super()._attached_comments()
        if self.inline_comment_behind_left_curly is not None:
            yield self.inline_comment_behind_left_curly


@dataclass(kw_only=True)
class Syntax(_Node):
    protobuf_version: str = ""

    _visit = "visit_syntax"


@dataclass(kw_only=True)
class Package(_Node):
    name: str = ""

    _visit = "visit_package"


@dataclass(kw_only=True)
class Import(_Node):
    location: str = ""
    modifier: str = ""

    _visit = "visit_import"


@dataclass(kw_only=True)
class Option(_Node):
    option_name: str = ""
    constant: str = ""

    _visit = "visit_option"


@dataclass(kw_only=True)
class EmptyStatement(_Node):
    _visit = "visit_empty_statement"


@dataclass(kw_only=True)
class Field(_Node):
    field_name: str = ""
    type: str = ""
    field_number: str = ""
    is_repeated: bool = False

    _visit = "visit_field"


@dataclass(kw_only=True)
class MapField(_Node):
    map_name: str = ""
    key_type: str = ""
    type: str = ""
    field_number: str = ""

    _visit = "visit_map_field"


@dataclass(kw_only=True)
class OneofField(_Node):
    field_name: str = ""
    type: str = ""
    field_number: str = ""

    _visit = "visit_oneof_field"


@dataclass(kw_only=True)
class EnumField(_Node):
    ident: str = ""
    number: str = ""

    _visit = "visit_enum_field"


@dataclass(kw_only=True)
class Extensions(_Node):
    ranges: list[str] = field(default_factory=list)

    _visit = "visit_extensions"


@dataclass(kw_only=True)
class Reserved(_Node):
    ranges: list[str] = field(default_factory=list)
    field_names: list[str] = field(default_factory=list)

    _visit = "visit_reserved"


@dataclass(kw_only=True)
class RPC(_Node):
    rpc_name: str = ""
    request: str = ""
    response: str = ""
    options: list[Option] = field(default_factory=list)

    _visit = "visit_rpc"

    def _children(self) -> Iterable[Any]:
        return self.options


@dataclass(kw_only=True)
class Message(_BlockNode):
    message_name: str = ""

    _visit = "visit_message"


@dataclass(kw_only=True)
class Enum(_BlockNode):
    enum_name: str = ""

    _visit = "visit_enum"


@dataclass(kw_only=True)
class GroupField(_BlockNode):
    group_name: str = ""
    field_number: str = ""
    is_repeated: bool = False

    _visit = "visit_group_field"


@dataclass(kw_only=True)
class Oneof(_BlockNode):
    oneof_name: str = ""

    _visit = "visit_oneof"


@dataclass(kw_only=True)
class Extend(_BlockNode):
    message_type: str = ""

    _visit = "visit_extend"


@dataclass(kw_only=True)
class Service(_BlockNode):
    service_name: str = ""

    _visit = "visit_service"


@dataclass(kw_only=True)
class Proto:
    """A whole parsed file."""

    syntax: Syntax | None = None
    body: list[Any] = field(default_factory=list)
    meta: ProtoMeta = field(default_factory=ProtoMeta)


def accept(node: Any, visitor: Any) -> None:
    """Walk ``node`` depth first, dispatching each element to ``visitor``.

    A visit method that returns a false value stops the walk into that
    element's children and attached comments.
    """
    if isinstance(node, Proto):
        if node.syntax is not None:
            accept(node.syntax, visitor)
        for child in node.body:
            accept(child, visitor)
        return
    if isinstance(node, Comment):
        visitor.visit_comment(node)
        return
    if not isinstance(node, _Node):
        raise TypeError(f"cannot visit {type(node).__name__}")
    if not getattr(visitor, node._visit)(node):
        return
    for child in node._children():
        accept(child, visitor)
    for comment in node._attached_comments():
        visitor.visit_comment(comment)