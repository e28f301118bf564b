"""Output of lint failures in plain text or JUnit XML."""

from __future__ import annotations

import abc
from typing import Iterable, TextIO

from protolinter.failure import Failure

PACKAGE_NAME = "net.protolint"
XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'

_PREFIX = "  "
_INDENT = "    "

_ESCAPES = {
    '"': "&#34;",
    "'": "&#39;",
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "\t": "&#x9;",
    "\n": "&#xA;",
    "\r": "&#xD;",
}


class Reporter(abc.ABC):
    """Writes failures to a stream in some format."""

    @abc.abstractmethod
    def report(self, stream: TextIO, failures: Iterable[Failure]) -> None:
        """Write ``failures`` to ``stream``."""


class PlainReporter(Reporter):
    """Writes each failure on its own line."""

    def report(self, stream: TextIO, failures: Iterable[Failure]) -> None:
        for failure in failures:
            stream.write(f"{failure}\n")


def _escape(text: str) -> str:
    return "".join(_ESCAPES.get(c, c) for c in text)


def _cdata(text: str) -> str:
    return "<![CDATA[" + text.replace("]]>", "]]]]><![CDATA[>") + "]]>"


def _attrs(**values: str) -> str:
    return "".join(f' {k}="{_escape(v)}"' for k, v in values.items())


def _line(depth: int, text: str) -> str:
    return _PREFIX + _INDENT * depth + text


class JUnitReporter(Reporter):
    """Writes failures as a JUnit XML test suite."""

    def report(self, stream: TextIO, failures: Iterable[Failure]) -> None:
        failures = list(failures)
        lines = [_line(0, "<testsuites>")]
        if failures:
            count = str(len(failures))
            lines.append(_line(1, f"<testsuite{_attrs(tests=count, failures=count, time='0')}>"))
            lines.append(_line(2, f"<package>{_escape(PACKAGE_NAME)}</package>"))
            for f in failures:
                case_attrs = _attrs(
                    classname=f.filename_without_ext(),
                    name=f"{PACKAGE_NAME}.{f.rule_id}",
                    time="0",
                )
                contents = f"line {f.pos.line}, col {f.pos.column}"
                lines.append(_line(2, f"<testcase{case_attrs}>"))
                lines.append(
                    _line(
                        3,
                        f"<failure{_attrs(message=f.message, type='error')}>"
                        f"{_cdata(contents)}</failure>",
                    )
                )
                lines.append(_line(2, "</testcase>"))
        else:
            lines.append(_line(1, f"<testsuite{_attrs(tests='1', failures='0', time='0')}>"))
            lines.append(_line(2, f"<package>{_escape(PACKAGE_NAME)}</package>"))
            case_attrs = _attrs(
                classname=f"{PACKAGE_NAME}.ALL_RULES", name="All Rules", time="0"
            )
            lines.append(_line(2, f"<testcase{case_attrs}></testcase>"))
        lines.append(_line(1, "</testsuite>"))
        lines.append(_line(0, "</testsuites>"))
        stream.write(XML_HEADER)
        stream.write("\n".join(lines))
        stream.write("\n")


_REPORTERS = {"plain": PlainReporter, "junit": JUnitReporter}


def get_reporter(name: str) -> Reporter:
    """The reporter called ``name``; ValueError if there is none."""
    try:
        return _REPORTERS[name]()
    except KeyError:
        raise ValueError('available reporters are "plain" and "junit"') from None