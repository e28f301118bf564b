"""The rule interface, rule collections and running rules over a file."""

from __future__ import annotations

import abc
from typing import Iterable

from protolinter.failure import Failure
from protolinter.nodes import Proto


class Rule(abc.ABC):
    """A lint rule that can be applied to a parsed proto file.

    ``id`` should be UPPER_SNAKE_CASE, ``purpose`` a human-readable sentence,
    and ``is_official`` tells whether the rule belongs to the official style guide.
    """

    id: str = ""
    purpose: str = ""
    is_official: bool = False

    @abc.abstractmethod
    def apply(self, proto: Proto) -> list[Failure]:
        """Apply the rule to ``proto`` and return the failures found."""


class Rules(list):
    """An ordered collection of rules."""

    def default(self) -> Rules:
        """The rules that belong to the official guide, in order."""
        return Rules(r for r in self if r.is_official)

    def ids(self) -> list[str]:
        """The ids of all rules, in order."""
        return [r.id for r in self]


def run_rules(proto: Proto, rules: Iterable[Rule]) -> list[Failure]:
    """Apply every rule to ``proto`` and return all failures in rule order."""
    failures: list[Failure] = []
    for rule in rules:
        failures.extend(rule.apply(proto))
    return failures