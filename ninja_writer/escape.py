"""Escaping of text for the ninja lexer.

Ninja uses ``$`` as its escape character. ``$`` and newlines always need a
``$`` in front of them; spaces only matter inside lists of paths and ``:``
only matters in the output list of a ``build`` statement, where it ends the
outputs.

See https://ninja-build.org/manual.html#ref_lexer
"""

from __future__ import annotations

ESCAPE_CHAR = "$"


def escape(text: str) -> str:
    """Escape ``$`` and newlines, leaving spaces and colons alone.

    >>> escape("$foo")
    '$$foo'
    >>> escape("foo: bar")
    'foo: bar'
    """
    return escape_impl(text, escape_space=False, escape_colon=False)


def escape_path(text: str) -> str:
    """Escape for a space-separated list of paths.

    >>> escape_path("foo bar")
    'foo$ bar'
    >>> escape_path("foo: bar")
    'foo:$ bar'
    """
    return escape_impl(text, escape_space=True, escape_colon=False)


def escape_build(text: str) -> str:
    """Escape for the outputs of a ``build`` statement, colons included.

    >>> escape_build("foo: bar")
    'foo$:$ bar'
    """
    return escape_impl(text, escape_space=True, escape_colon=True)


def escape_impl(text: str, escape_space: bool, escape_colon: bool) -> str:
    """Prefix every character ninja treats specially with ``$``.

    Text that needs no escaping is returned as the same object, nothing is
    copied in that case.
    """
    special = {"$", "\n"}
    if escape_space:
        special.add(" ")
    if escape_colon:
        special.add(":")

    output: list[str] | None = None
    for index, char in enumerate(text):
        needs_escape = char in special
        if output is None:
            if not needs_escape:
                continue
            output = [text[:index]]
        if needs_escape:
            output.append(ESCAPE_CHAR)
        output.append(char)

    if output is None:
        return text
    return "".join(output)


__all__ = ["escape", "escape_path", "escape_build", "escape_impl"]
