import os

import pytest

from protolinter.files import (
    NoProtoFilesError,
    ProtoFile,
    collect_proto_files,
    read_all_lines,
    write_lines_to_existing_file,
)


@pytest.fixture
def proto_tree(tmp_path, monkeypatch):
    root = tmp_path / "_testdata" / "testdir"
    (root / "innerdir").mkdir(parents=True)
    (root / "innerdir2").mkdir()
    (root / "innerdir3").mkdir()
    (root / "innerdir" / "testinner.proto").write_text('syntax = "proto3";\n')
    (root / "test.proto").write_text('syntax = "proto3";\n')
    (root / "test2.proto").write_text('syntax = "proto3";\n')
    (root / "innerdir2" / "notes.txt").write_text("not a proto\n")
    work = tmp_path / "a" / "b" / "c"
    work.mkdir(parents=True)
    monkeypatch.chdir(work)
    return root


def _rel(*parts):
    return os.path.join("..", "..", "..", "_testdata", "testdir", *parts)


def test_empty_directory_has_no_files(proto_tree):
    with pytest.raises(NoProtoFilesError):
        collect_proto_files([str(proto_tree / "innerdir3")])


def test_directory_without_proto_files(proto_tree):
    with pytest.raises(NoProtoFilesError):
        collect_proto_files([str(proto_tree / "innerdir2")])


def test_directory_with_one_proto_file(proto_tree):
    got = collect_proto_files([str(proto_tree / "innerdir")])
    assert got == [
        ProtoFile(
            str(proto_tree / "innerdir" / "testinner.proto"),
            _rel("innerdir", "testinner.proto"),
        )
    ]


def test_directory_with_proto_files_and_inner_dirs(proto_tree):
    got = collect_proto_files([str(proto_tree)])
    assert got == [
        ProtoFile(
            str(proto_tree / "innerdir" / "testinner.proto"),
            _rel("innerdir", "testinner.proto"),
        ),
        ProtoFile(str(proto_tree / "test.proto"), _rel("test.proto")),
        ProtoFile(str(proto_tree / "test2.proto"), _rel("test2.proto")),
    ]


def test_single_file_target(proto_tree):
    got = collect_proto_files([str(proto_tree / "test2.proto")])
    assert [f.display_path for f in got] == [_rel("test2.proto")]


def test_relative_target_is_made_absolute(proto_tree):
    got = collect_proto_files([_rel("innerdir")])
    assert got[0].path == str(proto_tree / "innerdir" / "testinner.proto")


def test_missing_path_raises(proto_tree):
    with pytest.raises(FileNotFoundError):
        collect_proto_files([str(proto_tree / "nope")])


def test_error_message_names_paths(proto_tree):
    target = str(proto_tree / "innerdir3")
    with pytest.raises(NoProtoFilesError) as exc:
        collect_proto_files([target])
    assert str(exc.value) == f"not found protocol buffer files in [{target}]"


@pytest.mark.parametrize("newline", ["\n", "\r", "\r\n"])
def test_lines_round_trip(tmp_path, newline):
    path = tmp_path / "x.proto"
    path.write_text("old content")
    lines = ["syntax = \"proto3\";", "", "message A {}", ""]
    write_lines_to_existing_file(str(path), lines, newline)
    assert read_all_lines(str(path), newline) == lines
    assert path.read_bytes() == newline.join(lines).encode()


def test_write_truncates(tmp_path):
    path = tmp_path / "x.proto"
    path.write_text("a much longer original content")
    write_lines_to_existing_file(str(path), ["ab"], "\n")
    assert path.read_text() == "ab"


def test_write_requires_existing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        write_lines_to_existing_file(str(tmp_path / "missing.proto"), ["a"], "\n")


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_all_lines(str(tmp_path / "missing.proto"), "\n")