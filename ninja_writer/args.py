"""Coercion of caller-supplied values into ninja arguments.

Anything passed as a name, value, path or list entry goes through
:func:`to_arg`. Strings are taken as is, path-like objects and bytes must
decode as UTF-8, numbers and booleans are converted to text.
"""

from __future__ import annotations

import os
from typing import Iterable, Union

Arg = Union[str, bytes, bytearray, os.PathLike, int, float, bool]
Args = Union[Arg, Iterable[Arg]]


def to_arg(value: Arg) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        # 2.0 is written as 2
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
        if isinstance(value, str):
            return value
    if isinstance(value, (bytes, bytearray)):
        # invalid UTF-8 is a caller error, let UnicodeDecodeError propagate
        return bytes(value).decode("utf-8")
    raise TypeError(f"Cannot convert {type(value).__name__} to a ninja argument")


def as_args(values: Args | None) -> list[str]:
    """Normalize a single argument or an iterable of them into a list of strings."""
    if values is None:
        return []
    if isinstance(values, (str, bytes, bytearray, os.PathLike, int, float, bool)):
        return [to_arg(values)]
    return [to_arg(value) for value in values]


__all__ = ["Arg", "Args", "to_arg", "as_args"]
