"""Discovery of .proto files and line-based file access."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from typing import Iterable, Iterator

PROTO_EXTENSION = ".proto"


@dataclass(frozen=True)
class ProtoFile:
    """A Protocol Buffer file.

    ``path`` is absolute and normalised. ``display_path`` is the path shown in
    output: relative to the working directory when possible, else absolute.
    """

    path: str
    display_path: str


class NoProtoFilesError(ValueError):
    """No .proto files were found under the given paths."""


def _extension(path: str) -> str:
    name = os.path.basename(path)
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def _abs_clean(path: str) -> str:
    if path == "":
        return path
    return os.path.abspath(path)


def _walk(path: str) -> Iterator[str]:
    """Yield ``path`` and everything below it in lexical order, without following links."""
    info = os.lstat(path)
    yield path
    if stat.S_ISDIR(info.st_mode):
        for name in sorted(os.listdir(path)):
            yield from _walk(os.path.join(path, name))


def _display_path(work_dir: str, path: str) -> str:
    try:
        display = os.path.relpath(path, work_dir)
    except ValueError:
        display = path
    return os.path.normpath(display)


def collect_proto_files(target_paths: Iterable[str]) -> list[ProtoFile]:
    """Collect every .proto file under ``target_paths``, in walk order.

    Raises OSError for a path that cannot be read and NoProtoFilesError when
    nothing is found.
    """
    target_paths = list(target_paths)
    work_dir = _abs_clean(os.getcwd())
    files = [
        ProtoFile(path, _display_path(work_dir, path))
        for target in target_paths
        for path in _walk(_abs_clean(target))
        if _extension(path) == PROTO_EXTENSION
    ]
    if not files:
        raise NoProtoFilesError(
            f"not found protocol buffer files in [{' '.join(target_paths)}]"
        )
    return files


def read_all_lines(file_name: str, newline: str) -> list[str]:
    """Read a file and split its content on ``newline``."""
    with open(file_name, encoding="utf-8", newline="") as f:
        data = f.read()
    if newline == "":
        return list(data)
    return data.split(newline)


def write_lines_to_existing_file(file_name: str, lines: Iterable[str], newline: str) -> None:
    """Replace the content of an existing file with ``lines`` joined by ``newline``."""
    fd = os.open(file_name, os.O_WRONLY | os.O_TRUNC)
    with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
        f.write(newline.join(lines))