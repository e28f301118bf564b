"""Visitors that walk a proto tree and collect failures."""

from __future__ import annotations

from typing import Any, Callable

from protolinter.disablerule import Interpreter
from protolinter.failure import Failure
from protolinter.nodes import Comment, Position, Proto, ProtoMeta, accept


class Visitor:
    """A visitor that does nothing and descends everywhere."""

    def on_start(self, proto: Proto) -> None:
        """Called before the walk starts."""

    def finish(self) -> None:
        """Called after the walk is done."""

    def visit_comment(self, comment: Comment) -> None:
        """Called for every comment."""

    def visit_empty_statement(self, statement: Any) -> bool:
        return True

    def visit_enum(self, enum: Any) -> bool:
        return True

    def visit_enum_field(self, field: Any) -> bool:
        return True

    def visit_extensions(self, extensions: Any) -> bool:
        return True

    def visit_extend(self, extend: Any) -> bool:
        return True

    def visit_field(self, field: Any) -> bool:
        return True

    def visit_group_field(self, field: Any) -> bool:
        return True

    def visit_import(self, import_: Any) -> bool:
        return True

    def visit_map_field(self, field: Any) -> bool:
        return True

    def visit_message(self, message: Any) -> bool:
        return True

    def visit_oneof(self, oneof: Any) -> bool:
        return True

    def visit_oneof_field(self, field: Any) -> bool:
        return True

    def visit_option(self, option: Any) -> bool:
        return True

    def visit_package(self, package: Any) -> bool:
        return True

    def visit_reserved(self, reserved: Any) -> bool:
        return True

    def visit_rpc(self, rpc: Any) -> bool:
        return True

    def visit_service(self, service: Any) -> bool:
        return True

    def visit_syntax(self, syntax: Any) -> bool:
        return True


class BaseAddVisitor(Visitor):
    """A visitor that accumulates failures for one rule."""

    def __init__(self, rule_id: str) -> None:
        self.rule_id = rule_id
        self.failures: list[Failure] = []

    def add_failure(self, pos: Position, message: str) -> None:
        self.failures.append(Failure(pos, message, self.rule_id))

    def add_failure_with_proto_meta(self, proto_meta: ProtoMeta, message: str) -> None:
        """Add a failure located at the start of the file."""
        self.add_failure(
            Position(filename=proto_meta.filename, offset=0, line=1, column=1),
            message,
        )


class _DisableRuleVisitor(Visitor):
    """Wraps a visitor and skips elements switched off by comments."""

    def __init__(self, inner: Visitor, rule_id: str) -> None:
        self._inner = inner
        self._interpreter = Interpreter(rule_id)

    def _guard(self, node: Any, visit: Callable[[Any], bool]) -> bool:
        if self._interpreter.interpret(
            node.comments,
            node.inline_comment,
            getattr(node, "inline_comment_behind_left_curly", None),
        ):
            return True
        return visit(node)

    def on_start(self, proto: Proto) -> None:
        self._inner.on_start(proto)

    def finish(self) -> None:
        self._inner.finish()

    def visit_comment(self, comment: Comment) -> None:
        if self._interpreter.interpret([comment]):
            return
        self._inner.visit_comment(comment)

    def visit_empty_statement(self, statement: Any) -> bool:
        return self._inner.visit_empty_statement(statement)

    def visit_enum(self, enum: Any) -> bool:
        return self._guard(enum, self._inner.visit_enum)

    def visit_enum_field(self, field: Any) -> bool:
        return self._guard(field, self._inner.visit_enum_field)

    def visit_extensions(self, extensions: Any) -> bool:
        return self._guard(extensions, self._inner.visit_extensions)

    def visit_extend(self, extend: Any) -> bool:
        return self._guard(extend, self._inner.visit_extend)

    def visit_field(self, field: Any) -> bool:
        return self._guard(field, self._inner.visit_field)

    def visit_group_field(self, field: Any) -> bool:
        return self._guard(field, self._inner.visit_group_field)

    def visit_import(self, import_: Any) -> bool:
        return self._guard(import_, self._inner.visit_import)

    def visit_map_field(self, field: Any) -> bool:
        return self._guard(field, self._inner.visit_map_field)

    def visit_message(self, message: Any) -> bool:
        return self._guard(message, self._inner.visit_message)

    def visit_oneof(self, oneof: Any) -> bool:
        return self._guard(oneof, self._inner.visit_oneof)

    def visit_oneof_field(self, field: Any) -> bool:
        return self._guard(field, self._inner.visit_oneof_field)

    def visit_option(self, option: Any) -> bool:
        return self._guard(option, self._inner.visit_option)

    def visit_package(self, package: Any) -> bool:
        return self._guard(package, self._inner.visit_package)

    def visit_reserved(self, reserved: Any) -> bool:
        return self._guard(reserved, self._inner.visit_reserved)

    def visit_rpc(self, rpc: Any) -> bool:
        return self._guard(rpc, self._inner.visit_rpc)

    def visit_service(self, service: Any) -> bool:
        return self._guard(service, self._inner.visit_service)

    def visit_syntax(self, syntax: Any) -> bool:
        return self._guard(syntax, self._inner.visit_syntax)


def run_visitor(visitor: Any, proto: Proto, rule_id: str) -> list[Failure]:
    """Walk ``proto`` with ``visitor``, honouring disable comments for ``rule_id``."""
    wrapper = _DisableRuleVisitor(visitor, rule_id)
    wrapper.on_start(proto)
    accept(proto, wrapper)
    visitor.finish()
    return list(visitor.failures)