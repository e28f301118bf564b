import pytest

from protolinter.disablerule import Command, CommandType, Interpreter, parse_command
from protolinter.nodes import Comment


def c(raw):
    return Comment(raw=raw)


def run_steps(rule_id, steps):
    interpreter = Interpreter(rule_id)
    return [interpreter.interpret(comments, *inlines) for comments, inlines, _ in steps], [
        want for _, _, want in steps
    ]


def test_disable_next_enum_field_rule():
    rid = "ENUM_FIELD_NAMES_UPPER_SNAKE_CASE"
    steps = [
        ([], [], False),
        ([c("// disable:next ENUM_FIELD_NAMES_UPPER_SNAKE_CASE")], [], False),
        ([c("// protolint:disable:next ENUM_NAMES_UPPER_CAMEL_CASE")], [], False),
        ([c("// protolint:disable:next ENUM_FIELD_NAMES_UPPER_SNAKE_CASE")], [], True),
        ([c("/*\nprotolint:disable:next ENUM_FIELD_NAMES_UPPER_SNAKE_CASE\n*/")], [], True),
        (
            [
                c("// protolint:disable:next ENUM_FIELD_NAMES_UPPER_SNAKE_CASE"),
                c("// protolint:disable:next ENUM_NAMES_UPPER_CAMEL_CASE"),
            ],
            [],
            True,
        ),
    ]
    got, want = run_steps(rid, steps)
    assert got == want


def test_disable_next_service_rule():
    steps = [
        ([c("// protolint:disable:next ENUM_NAMES_UPPER_CAMEL_CASE")], [], False),
        ([c("// protolint:disable:next SERVICE_NAMES_UPPER_CAMEL_CASE")], [], True),
    ]
    got, want = run_steps("SERVICE_NAMES_UPPER_CAMEL_CASE", steps)
    assert got == want


def test_disable_this_service_rule():
    steps = [
        ([], [c("// protolint:disable:this ENUM_NAMES_UPPER_CAMEL_CASE")], False),
        ([], [c("// protolint:disable:this SERVICE_NAMES_UPPER_CAMEL_CASE")], True),
    ]
    got, want = run_steps("SERVICE_NAMES_UPPER_CAMEL_CASE", steps)
    assert got == want


def test_disable_persists():
    steps = [
        ([c("// protolint:disable ENUM_FIELD_NAMES_UPPER_SNAKE_CASE")], [], False),
        ([c("// protolint:disable SERVICE_NAMES_UPPER_CAMEL_CASE")], [], True),
        ([], [], True),
        ([c("// protolint:disable:next SERVICE_NAMES_UPPER_CAMEL_CASE")], [], True),
        ([], [], True),
    ]
    got, want = run_steps("SERVICE_NAMES_UPPER_CAMEL_CASE", steps)
    assert got == want


def test_enable_after_disable():
    steps = [
        ([c("// protolint:disable SERVICE_NAMES_UPPER_CAMEL_CASE")], [], True),
        ([c("// protolint:enable ENUM_FIELD_NAMES_UPPER_SNAKE_CASE")], [], True),
        ([c("// protolint:enable SERVICE_NAMES_UPPER_CAMEL_CASE")], [], False),
        ([], [], False),
        ([c("// protolint:disable:next SERVICE_NAMES_UPPER_CAMEL_CASE")], [], True),
        ([], [], False),
    ]
    got, want = run_steps("SERVICE_NAMES_UPPER_CAMEL_CASE", steps)
    assert got == want


def test_none_comments_are_ignored():
    interpreter = Interpreter("SERVICE_NAMES_UPPER_CAMEL_CASE")
    assert interpreter.interpret([None], None, None) is False


def test_parse_command_splits_rule_ids():
    cmd = parse_command("// protolint:disable:next ENUM_NAMES_UPPER_CAMEL_CASE SERVICE_NAMES_UPPER_CAMEL_CASE")
    assert cmd == Command(
        ("ENUM_NAMES_UPPER_CAMEL_CASE", "SERVICE_NAMES_UPPER_CAMEL_CASE"),
        CommandType.DISABLE_NEXT,
    )


@pytest.mark.parametrize(
    "text, kind",
    [
        ("// protolint:disable X", CommandType.DISABLE),
        ("// protolint:enable X", CommandType.ENABLE),
        ("// protolint:disable:this X", CommandType.DISABLE_THIS),
    ],
)
def test_parse_command_types(text, kind):
    assert parse_command(text).type is kind


def test_parse_command_rejects_plain_comment():
    with pytest.raises(ValueError):
        parse_command("// disable:next ENUM_FIELD_NAMES_UPPER_SNAKE_CASE")