"""Built-in lint rules and the set of all rules."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Iterable

from protolinter.config import RulesOption
from protolinter.failure import Failure
from protolinter.nodes import RPC, Comment, Proto, Service, Syntax
from protolinter.rule import Rule, Rules
from protolinter.strs import is_upper_camel_case
from protolinter.visitor import BaseAddVisitor, run_visitor


def _quote(s: str) -> str:
    return json.dumps(s, ensure_ascii=False)


def _comment_text(comment: Comment) -> str:
    text = comment.raw.strip()
    if text.startswith("//"):
        text = text[2:]
    elif text.startswith("/*"):
        text = text[2:]
        if text.endswith("*/"):
            text = text[:-2]
    return text.strip()


def _has_comment(comments: Iterable[Comment]) -> bool:
    return any(True for _ in comments)


def _first_comment_starts_with(comments: list[Comment], name: str) -> bool:
    return bool(comments) and _comment_text(comments[0]).startswith(name)


class _RPCsHaveCommentVisitor(BaseAddVisitor):
    def __init__(self, rule_id: str, comment_starts_with_name: bool) -> None:
        super().__init__(rule_id)
        self._name_first = comment_starts_with_name

    def visit_rpc(self, rpc: RPC) -> bool:
        name = rpc.rpc_name
        if self._name_first and not _first_comment_starts_with(rpc.comments, name):
            self.add_failure(
                rpc.pos, f'RPC {_quote(name)} should have a comment of the form "// {name} ..."'
            )
        elif not _has_comment(rpc.comments):
            self.add_failure(rpc.pos, f"RPC {_quote(name)} should have a comment")
        return False


@dataclass(frozen=True)
class RPCsHaveCommentRule(Rule):
    """Verifies that all rpcs have a comment."""

    comment_starts_with_name: bool = False

    id = "RPCS_HAVE_COMMENT"
    purpose = "Verifies that all rpcs have a comment."
    is_official = False

    def apply(self, proto: Proto) -> list[Failure]:
        visitor = _RPCsHaveCommentVisitor(self.id, self.comment_starts_with_name)
        return run_visitor(visitor, proto, self.id)


class _ServiceNamesEndWithVisitor(BaseAddVisitor):
    def __init__(self, rule_id: str, text: str) -> None:
        super().__init__(rule_id)
        self._text = text

    def visit_service(self, service: Service) -> bool:
        if not service.service_name.endswith(self._text):
            self.add_failure(
                service.pos,
                f"Service name {_quote(service.service_name)} must end with {self._text}",
            )
        return False


@dataclass(frozen=True)
class ServiceNamesEndWithRule(Rule):
    """Verifies that all service names end with the specified value."""

    text: str = ""

    id = "SERVICE_NAMES_END_WITH"
    purpose = "Verifies that all service names end with the specified value."
    is_official = False

    def apply(self, proto: Proto) -> list[Failure]:
        return run_visitor(_ServiceNamesEndWithVisitor(self.id, self.text), proto, self.id)


class _ServiceNamesUpperCamelCaseVisitor(BaseAddVisitor):
    def visit_service(self, service: Service) -> bool:
        if not is_upper_camel_case(service.service_name):
            self.add_failure(
                service.pos,
                f"Service name {_quote(service.service_name)} must be UpperCamelCase",
            )
        return False


@dataclass(frozen=True)
class ServiceNamesUpperCamelCaseRule(Rule):
    """Verifies that all service names are CamelCase with an initial capital."""

    id = "SERVICE_NAMES_UPPER_CAMEL_CASE"
    purpose = "Verifies that all service names are CamelCase (with an initial capital)."
    is_official = True

    def apply(self, proto: Proto) -> list[Failure]:
        return run_visitor(_ServiceNamesUpperCamelCaseVisitor(self.id), proto, self.id)


class _ServicesHaveCommentVisitor(BaseAddVisitor):
    def __init__(self, rule_id: str, comment_starts_with_name: bool) -> None:
        super().__init__(rule_id)
        self._name_first = comment_starts_with_name

    def visit_service(self, service: Service) -> bool:
        name = service.service_name
        if self._name_first and not _first_comment_starts_with(service.comments, name):
            self.add_failure(
                service.pos,
                f'Service {_quote(name)} should have a comment of the form "// {name} ..."',
            )
        elif not _has_comment(service.comments):
            self.add_failure(service.pos, f"Service {_quote(name)} should have a comment")
        return False


@dataclass(frozen=True)
class ServicesHaveCommentRule(Rule):
    """Verifies that all services have a comment."""

    comment_starts_with_name: bool = False

    id = "SERVICES_HAVE_COMMENT"
    purpose = "Verifies that all services have a comment."
    is_official = False

    def apply(self, proto: Proto) -> list[Failure]:
        visitor = _ServicesHaveCommentVisitor(self.id, self.comment_starts_with_name)
        return run_visitor(visitor, proto, self.id)


class _SyntaxConsistentVisitor(BaseAddVisitor):
    def __init__(self, rule_id: str, version: str) -> None:
        super().__init__(rule_id)
        self._version = version

    def visit_syntax(self, syntax: Syntax) -> bool:
        if syntax.protobuf_version != self._version:
            self.add_failure(
                syntax.pos,
                f"Syntax should be {_quote(self._version)} "
                f"but was {_quote(syntax.protobuf_version)}.",
            )
        return False


@dataclass(frozen=True)
class SyntaxConsistentRule(Rule):
    """Verifies that syntax is a specified version (proto3 when none is given)."""

    version: str = "proto3"

    id = "SYNTAX_CONSISTENT"
    purpose = "Verifies that syntax is a specified version(default is proto3)."
    is_official = False

    def __post_init__(self) -> None:
        if not self.version:
            object.__setattr__(self, "version", "proto3")

    def apply(self, proto: Proto) -> list[Failure]:
        return run_visitor(_SyntaxConsistentVisitor(self.id, self.version), proto, self.id)


def new_all_rules(option: RulesOption, fix_mode: bool) -> Rules:
    """Create every built-in rule configured by ``option``, in a fixed order.

    ``fix_mode`` is accepted for rules that can rewrite files; none of the
    rules here do.
    """
    return Rules(
        [
            SyntaxConsistentRule(option.syntax_consistent.version),
            RPCsHaveCommentRule(option.rpcs_have_comment.comment_starts_with_name),
            ServiceNamesUpperCamelCaseRule(),
            ServiceNamesEndWithRule(option.service_names_end_with.text),
            ServicesHaveCommentRule(option.services_have_comment.comment_starts_with_name),
        ]
    )