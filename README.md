# protolinter

Lint rules for Protocol Buffer files, working on an in-memory syntax tree.
The package provides the tree types, a visitor framework that honours
`protolint:disable` comments, a handful of built-in rules, a strict YAML
configuration loader, `.proto` file discovery, and plain-text and JUnit XML
reporters.

## Installation

```
pip install protolinter
```

## What it does not do

There is no `.proto` parser in this package. Syntax trees have to be built
from the classes in `protolinter.nodes` (or produced by some other parser
and converted to them). For the same reason there is no `lint` command: the
command line can only list the rules.

The configuration accepts and validates options for indentation, import
sorting, line length, file names, enum fields, prepositions and comments on
messages, fields and enums, but no rule in this package uses them.

## Command line

```
protolinter list
```

prints each built-in rule as `ID: purpose` and exits with status 0. Run
without arguments, or with any other command, it prints a usage text to
standard error and exits with status 1.

## Building a tree and applying a rule

```python
from protolinter.nodes import Position, Proto, Service
from protolinter.rules import ServiceNamesEndWithRule

proto = Proto(body=[
    Service(service_name="SomeThing", pos=Position("example.proto", 100, 5, 10)),
])
for failure in ServiceNamesEndWithRule("Service").apply(proto):
    print(failure)
# [example.proto:5:10] Service name "SomeThing" must end with Service
```

Nodes in `protolinter.nodes` include `Syntax`, `Package`, `Import`,
`Option`, `Message`, `Enum`, `EnumField`, `Field`, `MapField`, `GroupField`,
`Oneof`, `OneofField`, `Extensions`, `Extend`, `Reserved`, `Service`, `RPC`
and `EmptyStatement`. Each carries `comments`, `inline_comment` and `pos`;
block nodes also have `body` and `inline_comment_behind_left_curly`.
`accept(node, visitor)` walks a tree depth first.

## Built-in rules

`protolinter.rules` holds:

| Id | Class | Official |
| --- | --- | --- |
| `SYNTAX_CONSISTENT` | `SyntaxConsistentRule(version="proto3")` | no |
| `RPCS_HAVE_COMMENT` | `RPCsHaveCommentRule(comment_starts_with_name=False)` | no |
| `SERVICE_NAMES_UPPER_CAMEL_CASE` | `ServiceNamesUpperCamelCaseRule()` | yes |
| `SERVICE_NAMES_END_WITH` | `ServiceNamesEndWithRule(text="")` | no |
| `SERVICES_HAVE_COMMENT` | `ServicesHaveCommentRule(comment_starts_with_name=False)` | no |

With `comment_starts_with_name=True`, the first leading comment must begin
with the name of the service or rpc. `new_all_rules(option, fix_mode)`
builds all of them from a `RulesOption`, returning a `Rules` list whose
`default()` keeps the official rules and whose `ids()` lists the ids.
`protolinter.rule.run_rules(proto, rules)` applies several rules in order.

## Disabling rules with comments

`run_visitor` skips elements according to comments attached to them:

- `protolint:disable RULE_ID` switches the rule off from that element on;
- `protolint:enable RULE_ID` switches it on again;
- `protolint:disable:next RULE_ID` in a leading comment skips that element;
- `protolint:disable:this RULE_ID` in an inline comment skips that element.

```python
from protolinter.nodes import Comment, Proto, Service
from protolinter.rules import ServiceNamesUpperCamelCaseRule

proto = Proto(body=[
    Service(
        service_name="lower_case",
        comments=[Comment(raw="// protolint:disable:next SERVICE_NAMES_UPPER_CAMEL_CASE")],
    ),
])
assert ServiceNamesUpperCamelCaseRule().apply(proto) == []
```

Custom rules subclass `protolinter.rule.Rule` (setting `id`, `purpose`,
`is_official` and implementing `apply`) and usually collect failures with a
`protolinter.visitor.BaseAddVisitor` run through
`protolinter.visitor.run_visitor`.

## Configuration

`protolinter.config.get_external_config(dir_path)` reads `.protolint.yaml`,
or else `protolint.yaml`, from `dir_path` and returns an `ExternalConfig`
(empty when neither exists). `parse_external_config(text)` parses YAML text
directly. Unknown keys, mistyped values and invalid options raise
`ConfigError`.

```yaml
lint:
  ignores:
    - id: SERVICE_NAMES_UPPER_CAMEL_CASE
      files:
        - path/to/foo.proto
  files:
    exclude:
      - path/to/generated.proto
  directories:
    exclude:
      - third_party
  rules:
    no_default: false
    all_default: false
    add:
      - RPCS_HAVE_COMMENT
    remove:
      - SERVICE_NAMES_UPPER_CAMEL_CASE
  rules_option:
    syntax_consistent:
      version: proto3
    service_names_end_with:
      text: Service
    services_have_comment:
      comment_starts_with_name: true
    rpcs_have_comment:
      comment_starts_with_name: true
    indent:
      style: tab
      newline: "\n"
```

Official rules are enabled by default; `all_default: true` enables every
rule and `no_default: true` starts from an empty set, so only rules under
`add` run. `ExternalConfig.should_skip_rule(rule_id, display_path,
default_rule_ids)` answers whether a rule is off for a file, and
`protolinter.cli.gen_rules(external_config, display_path, fix_mode)` returns
the rules to apply to that file.

## Files and reporters

`protolinter.files.collect_proto_files(paths)` walks files and directories
and returns `ProtoFile(path, display_path)` entries for every `.proto` file,
raising `NoProtoFilesError` when none is found.

`protolinter.reporters.get_reporter("plain")` or `get_reporter("junit")`
returns a `PlainReporter` or `JUnitReporter`; `report(stream, failures)`
writes the failures to a text stream.