from pathlib import Path, PurePosixPath

import pytest

from ninja_writer import as_args, to_arg


def test_strings_are_kept():
    assert to_arg("foo") == "foo"


def test_numbers_and_booleans():
    assert to_arg(1) == "1"
    assert to_arg(2.5) == "2.5"
    assert to_arg(2.0) == "2"
    assert to_arg(-3.0) == "-3"
    assert to_arg(float("inf")) == "inf"
    assert to_arg(True) == "true"
    assert to_arg(False) == "false"


def test_paths():
    assert to_arg(PurePosixPath("/foo/bar.c")) == "/foo/bar.c"
    assert to_arg(Path("foo")) == "foo"


def test_bytes_must_be_utf8():
    assert to_arg(b"foo") == "foo"
    assert to_arg(bytearray([0xE4, 0xBD, 0xA0, 0xE5, 0xA5, 0xBD])) == "你好"
    with pytest.raises(UnicodeDecodeError):
        to_arg(b"\xff\xfe")


def test_unsupported_type():
    with pytest.raises(TypeError):
        to_arg(object())


def test_as_args_wraps_single_values():
    assert as_args("foo.c") == ["foo.c"]
    assert as_args(Path("foo.c")) == ["foo.c"]
    assert as_args(None) == []


def test_as_args_mixed_iterable():
    assert as_args(["b.o", b"a.o", Path("c.o"), 3]) == ["b.o", "a.o", "c.o", "3"]
    assert as_args(name for name in ("x", "y")) == ["x", "y"]
