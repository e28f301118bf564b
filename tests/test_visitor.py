import pytest

from protolinter.failure import Failure
from protolinter.nodes import Comment, Message, Position, Proto, ProtoMeta
from protolinter.visitor import BaseAddVisitor, run_visitor

RULE = "MESSAGE_NAMES_UPPER_CAMEL_CASE"


class MessageVisitor(BaseAddVisitor):
    def __init__(self, rule_id=RULE, next_=False):
        super().__init__(rule_id)
        self.next_ = next_
        self.finished = False

    def visit_message(self, message):
        self.add_failure(message.pos, "Test Message")
        return self.next_

    def finish(self):
        self.finished = True


def pos(offset, line, column):
    return Position(filename="example.proto", offset=offset, line=line, column=column)


def failure(offset, line, column):
    return Failure(pos(offset, line, column), "Test Message", RULE)


def test_visit_no_messages():
    assert run_visitor(MessageVisitor(), Proto(), "") == []


def test_visit_a_message():
    proto = Proto(body=[Message(pos=pos(100, 10, 5))])
    assert run_visitor(MessageVisitor(), proto, "") == [failure(100, 10, 5)]


def test_visit_messages():
    proto = Proto(body=[Message(pos=pos(100, 10, 5)), Message(pos=pos(200, 20, 10))])
    assert run_visitor(MessageVisitor(), proto, "") == [failure(100, 10, 5), failure(200, 20, 10)]


def test_visit_messages_recursively():
    proto = Proto(body=[Message(pos=pos(100, 10, 5), body=[Message(pos=pos(200, 20, 10))])])
    got = run_visitor(MessageVisitor(next_=True), proto, "")
    assert got == [failure(100, 10, 5), failure(200, 20, 10)]


def test_nested_message_not_visited_without_next():
    proto = Proto(body=[Message(pos=pos(100, 10, 5), body=[Message(pos=pos(200, 20, 10))])])
    assert run_visitor(MessageVisitor(), proto, "") == [failure(100, 10, 5)]


def test_disable_next():
    proto = Proto(
        body=[
            Message(
                pos=pos(100, 10, 5),
                comments=[Comment(raw=f"// protolint:disable:next {RULE}")],
            ),
            Message(pos=pos(200, 20, 10)),
        ]
    )
    assert run_visitor(MessageVisitor(), proto, RULE) == [failure(200, 20, 10)]


def test_disable_this_inline():
    proto = Proto(
        body=[
            Message(
                pos=pos(100, 10, 5),
                inline_comment=Comment(raw=f"// protolint:disable:this {RULE}"),
            ),
            Message(pos=pos(200, 20, 10)),
        ]
    )
    assert run_visitor(MessageVisitor(), proto, RULE) == [failure(200, 20, 10)]


def test_disable_then_enable_on_message():
    proto = Proto(
        body=[
            Message(pos=pos(100, 10, 5), comments=[Comment(raw=f"// protolint:disable {RULE}")]),
            Message(pos=pos(200, 20, 10)),
            Message(pos=pos(300, 30, 15), comments=[Comment(raw=f"// protolint:enable {RULE}")]),
        ]
    )
    assert run_visitor(MessageVisitor(), proto, RULE) == [failure(300, 30, 15)]


def test_disable_then_enable_by_last_line_comment():
    proto = Proto(
        body=[
            Message(pos=pos(100, 10, 5), comments=[Comment(raw=f"// protolint:disable {RULE}")]),
            Message(pos=pos(200, 20, 10)),
            Comment(raw=f"// protolint:enable {RULE}"),
            Message(pos=pos(300, 30, 15)),
        ]
    )
    assert run_visitor(MessageVisitor(), proto, RULE) == [failure(300, 30, 15)]


def test_finish_is_called():
    visitor = MessageVisitor()
    run_visitor(visitor, Proto(), RULE)
    assert visitor.finished is True


def test_on_start_error_propagates():
    class Failing(MessageVisitor):
        def on_start(self, proto):
            raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        run_visitor(Failing(), Proto(body=[Message()]), RULE)


def test_add_failure_with_proto_meta_points_at_file_start():
    visitor = BaseAddVisitor("SOME_RULE")
    visitor.add_failure_with_proto_meta(ProtoMeta(filename="example.proto"), "bad file")
    assert visitor.failures == [
        Failure(Position(filename="example.proto", offset=0, line=1, column=1), "bad file", "SOME_RULE")
    ]