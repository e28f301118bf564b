"""Interpretation of ``protolint:disable`` style comments."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Iterable

from protolinter.nodes import Comment


class CommandType(enum.Enum):
    DISABLE = "disable"
    ENABLE = "enable"
    DISABLE_NEXT = "disable:next"
    DISABLE_THIS = "disable:this"


_PATTERNS = [
    (CommandType.DISABLE, re.compile(r"protolint:disable (.*)")),
    (CommandType.ENABLE, re.compile(r"protolint:enable (.*)")),
    (CommandType.DISABLE_NEXT, re.compile(r"protolint:disable:next (.*)")),
    (CommandType.DISABLE_THIS, re.compile(r"protolint:disable:this (.*)")),
]


@dataclass(frozen=True)
class Command:
    """One directive found in a comment."""

    rule_ids: tuple[str, ...]
    type: CommandType


def parse_command(comment: str) -> Command:
    """Parse a directive from comment text; raise ValueError if there is none."""
    for command_type, pattern in _PATTERNS:
        match = pattern.search(comment)
        if match:
            return Command(tuple(match.group(1).split(" ")), command_type)
    raise ValueError("invalid disabled comments")


def _parse_all(comments: Iterable[Comment | None]) -> list[Command]:
    commands = []
    for comment in comments:
        if comment is None:
            continue
        try:
            commands.append(parse_command(comment.raw))
        except ValueError:
            continue
    return commands


class Interpreter:
    """Tracks whether one rule is switched off as elements are visited in order."""

    def __init__(self, rule_id: str) -> None:
        self.rule_id = rule_id
        self.is_disabled = False

    def _has(self, commands: list[Command], command_type: CommandType) -> bool:
        return any(c.type is command_type and self.rule_id in c.rule_ids for c in commands)

    def _update(self, commands: list[Command]) -> bool:
        if self._has(commands, CommandType.ENABLE):
            self.is_disabled = False
            return False
        if self._has(commands, CommandType.DISABLE):
            self.is_disabled = True
            return True
        return False

    def interpret(self, comments: Iterable[Comment | None] | None, *args: Comment | None) -> bool:
        """Return True if the rule must not apply to the element carrying these comments.

        ``comments`` are the leading comments, ``args`` the inline ones.
        """
        leading = _parse_all(comments or ())
        inline = _parse_all(args)
        return (
            self._update(leading + inline)
            or self._has(leading, CommandType.DISABLE_NEXT)
            or self._has(inline, CommandType.DISABLE_THIS)
            or self.is_disabled
        )