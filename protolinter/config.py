"""The external YAML configuration of the linter."""

import dataclasses
import os
import typing
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import yaml

CONFIG_FILE_NAMES = (".protolint.yaml", "protolint.yaml")

_NEWLINES = ("\n", "\r", "\r\n", "")
_INDENT_STYLES = {"tab": "\t", "4": " " * 4, "2": " " * 2, "": ""}


class ConfigError(ValueError):
    """The configuration is malformed or holds an invalid value."""


def _as_str(value: Any, key: str) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ConfigError(f"cannot read {type(value).__name__} as a string for {key}")


def _as_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    raise ConfigError(f"cannot read {value!r} as a bool for {key}")


def _as_int(value: Any, key: str) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise ConfigError(f"cannot read {value!r} as an int for {key}")


def _convert(hint: Any, value: Any, key: str) -> Any:
    if isinstance(hint, type) and issubclass(hint, _Section):
        return hint.from_dict(value)
    if hint is str:
        return "" if value is None else _as_str(value, key)
    if hint is bool:
        return _as_bool(value, key)
    if hint is int:
        return _as_int(value, key)
    if typing.get_origin(hint) is list:
        if not isinstance(value, list):
            raise ConfigError(f"cannot read {type(value).__name__} as a list for {key}")
        (item_hint,) = typing.get_args(hint)
        return [_convert(item_hint, item, key) for item in value]
    raise TypeError(f"unsupported configuration type {hint!r}")


class _Section:
    """Strict construction of a configuration dataclass from a YAML mapping."""

    @classmethod
    def from_dict(cls, data: Any) -> Any:
        """Build from a mapping; unknown keys and mistyped values raise ConfigError."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigError(f"cannot read {type(data).__name__} into {cls.__name__}")
        hints = {f.name: f.type for f in dataclasses.fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = str(key)
            if name not in hints:
                raise ConfigError(f"field {name} not found in {cls.__name__}")
            if value is None:
                continue
            kwargs[name] = _convert(hints[name], value, name)
        return cls(**kwargs)


@dataclass
class Directories(_Section):
    """Directories whose files are excluded from linting."""

    exclude: list[str] = field(default_factory=list)

    def _should_skip_rule(self, display_path: str) -> bool:
        return any(display_path.startswith(d + os.sep) for d in self.exclude)


@dataclass
class Files(_Section):
    """Files excluded from linting."""

    exclude: list[str] = field(default_factory=list)

    def _should_skip_rule(self, display_path: str) -> bool:
        return display_path in self.exclude


@dataclass
class Ignore(_Section):
    """Files for which one rule is ignored."""

    id: str = ""
    files: list[str] = field(default_factory=list)

    def _should_skip_rule(self, rule_id: str, display_path: str) -> bool:
        return self.id == rule_id and display_path in self.files


@dataclass
class RulesConfig(_Section):
    """The enabled rule set."""

    no_default: bool = False
    all_default: bool = False
    add: list[str] = field(default_factory=list)
    remove: list[str] = field(default_factory=list)

    def _should_skip_rule(self, rule_id: str, default_rule_ids: list[str]) -> bool:
        rule_ids = [] if self.no_default else list(default_rule_ids)
        rule_ids.extend(self.add)
        enabled = [i for i in rule_ids if i not in self.remove]
        return rule_id not in enabled


@dataclass
class FileNamesLowerSnakeCaseOption(_Section):
    excludes: list[str] = field(default_factory=list)


def _check_newline(newline: str) -> str:
    if newline not in _NEWLINES:
        raise ConfigError(
            f"{newline} is an invalid newline option. valid option is \\n, \\r or \\r\\n"
        )
    return newline


@dataclass
class ImportsSortedOption(_Section):
    newline: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "ImportsSortedOption":
        raw = super().from_dict(data)
        return cls(newline=_check_newline(raw.newline))


@dataclass
class MaxLineLengthOption(_Section):
    max_chars: int = 0
    tab_chars: int = 0


@dataclass
class IndentOption(_Section):
    """Indent style (the indent text itself) and newline."""

    style: str = ""
    newline: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "IndentOption":
        raw = super().from_dict(data)
        if raw.style not in _INDENT_STYLES:
            raise ConfigError(
                f"{raw.style} is an invalid style option. valid option is tab, 4 or 2"
            )
        return cls(style=_INDENT_STYLES[raw.style], newline=_check_newline(raw.newline))


@dataclass
class EnumFieldNamesZeroValueEndWithOption(_Section):
    suffix: str = ""


@dataclass
class ServiceNamesEndWithOption(_Section):
    text: str = ""


@dataclass
class FieldNamesExcludePrepositionsOption(_Section):
    prepositions: list[str] = field(default_factory=list)
    excludes: list[str] = field(default_factory=list)


@dataclass
class MessageNamesExcludePrepositionsOption(_Section):
    prepositions: list[str] = field(default_factory=list)
    excludes: list[str] = field(default_factory=list)


@dataclass
class MessagesHaveCommentOption(_Section):
    comment_starts_with_name: bool = False


@dataclass
class ServicesHaveCommentOption(_Section):
    comment_starts_with_name: bool = False


@dataclass
class RPCsHaveCommentOption(_Section):
    comment_starts_with_name: bool = False


@dataclass
class FieldsHaveCommentOption(_Section):
    comment_starts_with_name: bool = False


@dataclass
class EnumsHaveCommentOption(_Section):
    comment_starts_with_name: bool = False


@dataclass
class EnumFieldsHaveCommentOption(_Section):
    comment_starts_with_name: bool = False


@dataclass
class SyntaxConsistentOption(_Section):
    version: str = ""


@dataclass
class RulesOption(_Section):
    """Options for individual rules."""

    file_names_lower_snake_case: FileNamesLowerSnakeCaseOption = field(
        default_factory=FileNamesLowerSnakeCaseOption
    )
    imports_sorted: ImportsSortedOption = field(default_factory=ImportsSortedOption)
    max_line_length: MaxLineLengthOption = field(default_factory=MaxLineLengthOption)
    indent: IndentOption = field(default_factory=IndentOption)
    enum_field_names_zero_value_end_with: EnumFieldNamesZeroValueEndWithOption = field(
        default_factory=EnumFieldNamesZeroValueEndWithOption
    )
    service_names_end_with: ServiceNamesEndWithOption = field(
        default_factory=ServiceNamesEndWithOption
    )
    field_names_exclude_prepositions: FieldNamesExcludePrepositionsOption = field(
        default_factory=FieldNamesExcludePrepositionsOption
    )
    message_names_exclude_prepositions: MessageNamesExcludePrepositionsOption = field(
        default_factory=MessageNamesExcludePrepositionsOption
    )
    messages_have_comment: MessagesHaveCommentOption = field(
        default_factory=MessagesHaveCommentOption
    )
    services_have_comment: ServicesHaveCommentOption = field(
        default_factory=ServicesHaveCommentOption
    )
    rpcs_have_comment: RPCsHaveCommentOption = field(default_factory=RPCsHaveCommentOption)
    fields_have_comment: FieldsHaveCommentOption = field(default_factory=FieldsHaveCommentOption)
    enums_have_comment: EnumsHaveCommentOption = field(default_factory=EnumsHaveCommentOption)
    enum_fields_have_comment: EnumFieldsHaveCommentOption = field(
        default_factory=EnumFieldsHaveCommentOption
    )
    syntax_consistent: SyntaxConsistentOption = field(default_factory=SyntaxConsistentOption)

    @classmethod
    def from_dict(cls, data: Any) -> "RulesOption":
        """Build from the rules_option mapping; invalid entries raise ConfigError."""
        return super().from_dict(data)


@dataclass
class Lint(_Section):
    """The lint section of the configuration."""

    ignores: list[Ignore] = field(default_factory=list)
    files: Files = field(default_factory=Files)
    directories: Directories = field(default_factory=Directories)
    rules: RulesConfig = field(default_factory=RulesConfig)
    rules_option: RulesOption = field(default_factory=RulesOption)


@dataclass
class ExternalConfig(_Section):
    """The whole configuration file."""

    lint: Lint = field(default_factory=Lint)

    @classmethod
    def from_dict(cls, data: Any) -> "ExternalConfig":
        """Build from the top-level mapping; invalid entries raise ConfigError."""
        return super().from_dict(data)

    def should_skip_rule(
        self,
        rule_id: str,
        display_path: str,
        default_rule_ids: list[str] | None,
    ) -> bool:
        """Whether ``rule_id`` must not be applied to the file at ``display_path``."""
        lint = self.lint
        return (
            any(i._should_skip_rule(rule_id, display_path) for i in lint.ignores)
            or lint.files._should_skip_rule(display_path)
            or lint.directories._should_skip_rule(display_path)
            or lint.rules._should_skip_rule(rule_id, default_rule_ids or [])
        )


def parse_external_config(text: str) -> ExternalConfig:
    """Parse configuration YAML text strictly."""
    if not text:
        return ExternalConfig()
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(str(e)) from e
    return ExternalConfig.from_dict(data)


def _find_config_path(dir_path: str) -> str | None:
    for name in CONFIG_FILE_NAMES:
        path = os.path.join(dir_path, name)
        try:
            os.stat(path)
        except FileNotFoundError:
            continue
        return path
    return None


def get_external_config(dir_path: str) -> ExternalConfig:
    """Load the configuration file from ``dir_path``; empty config if there is none."""
    path = _find_config_path(dir_path)
    if path is None:
        return ExternalConfig()
    with open(path, "rb") as f:
        data = f.read()
    return parse_external_config(data.decode("utf-8"))