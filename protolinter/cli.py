"""Command line entry point and rule selection."""

from __future__ import annotations

import enum
import sys
from typing import TextIO

from protolinter.config import ExternalConfig, RulesOption
from protolinter.rule import Rules
from protolinter.rules import new_all_rules

HELP = """
Protocol Buffer Linter Command.

Usage:
  protolinter list
"""


class ExitCode(enum.IntEnum):
    SUCCESS = 0
    FAILURE = 1


def gen_rules(external_config: ExternalConfig, display_path: str, fix_mode: bool) -> Rules:
    """The rules to apply to the file at ``display_path`` under ``external_config``."""
    lint = external_config.lint
    all_rules = new_all_rules(lint.rules_option, fix_mode)
    if lint.rules.all_default:
        default_rule_ids = all_rules.ids()
    else:
        default_rule_ids = all_rules.default().ids()
    return Rules(
        r
        for r in all_rules
        if not external_config.should_skip_rule(r.id, display_path, default_rule_ids)
    )


def list_rules(stdout: TextIO) -> ExitCode:
    """Write each rule's id and purpose to ``stdout``."""
    try:
        for r in new_all_rules(RulesOption(), False):
            stdout.write(f"{r.id}: {r.purpose}\n")
    except OSError:
        return ExitCode.FAILURE
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Run the command and return its exit code."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stderr.write(HELP)
        return ExitCode.FAILURE
    if args[0] == "list":
        return list_rules(sys.stdout)
    sys.stderr.write(f"unknown command: {args[0]}\n")
    sys.stderr.write(HELP)
    return ExitCode.FAILURE


if __name__ == "__main__":
    sys.exit(main())