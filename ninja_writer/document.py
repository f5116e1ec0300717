"""The top-level ninja file writer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NotRequired, TypedDict

from ninja_writer.args import Arg, Args
from ninja_writer.formatter import DEFAULT_FORMATTER
from ninja_writer.logger import Logger
from ninja_writer.nodes import Build, Comment, Default, Include, Pool, Rule, Statement, Subninja
from ninja_writer.ownership import Ownership
from ninja_writer.statements import BuildRef, PoolRef, RuleRef, StatementList
from ninja_writer.utils import resolve_config
from ninja_writer.variable import Variable


class DocumentConfig(TypedDict):
    thread_safe: NotRequired[bool]
    enable_logger: NotRequired[bool]
    log_level: NotRequired[int]


class DocumentConfigRequired(TypedDict):
    thread_safe: bool
    enable_logger: bool
    log_level: int


DEFAULT_CONFIG: DocumentConfigRequired = {
    "thread_safe": False,
    "enable_logger": False,
    "log_level": logging.DEBUG,
}


class NinjaDocument:
    """A ninja file under construction.

    Statements are written in the order they are added. ``rule``, ``phony``
    and ``pool`` hand back references for further configuration; the other
    statements return the document so calls can be chained::

        ninja = NinjaDocument()
        ninja.variable("cflags", "-Wall")
        cc = ninja.rule("cc", "gcc $cflags -c $in -o $out").description("CC $out")
        cc.build(["foo.o"]).with_(["foo.c"])
        ninja.defaults(["foo.o"])
        text = ninja.render()

    With ``{"thread_safe": True}`` statements may be added from several
    threads at once. Attaching to one statement from several threads at once
    is still unsupported and raises :class:`~ninja_writer.errors.BorrowError`.
    """

    def __init__(self, config: DocumentConfig | None = None):
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.ownership = Ownership.SHARED if self.config["thread_safe"] else Ownership.SINGLE
        self.logger = Logger(
            config={
                "name": "ninja_writer.document",
                "is_enabled": self.config["enable_logger"],
                "level": self.config["log_level"],
            }
        ).scoped
        self.statements = StatementList(self.ownership, logger=self.logger)
        # built-ins, usable by name but never written out
        self.phony_rule = Rule("phony", "", ownership=self.ownership)
        self.console_pool = Pool("console", 1, ownership=self.ownership, built_in=True)
        self.logger.debug(f"Created document with {self.ownership.value} ownership")

    def rule(self, name: Arg, command: Arg) -> RuleRef:
        return self.add_rule(Rule(name, command))

    def add_rule(self, rule: Rule) -> RuleRef:
        return RuleRef(self.statements, self.statements.append(rule))

    def phony(self, outputs: Args) -> BuildRef:
        """Add a build edge using the built-in ``phony`` rule."""
        return self.add_build(Build(self.phony_rule, outputs))

    def add_build(self, build: Build) -> BuildRef:
        return BuildRef(self.statements, self.statements.append(build))

    def pool(self, name: Arg, depth: int | Arg) -> PoolRef:
        return self.add_pool(Pool(name, depth))

    def add_pool(self, pool: Pool) -> PoolRef:
        return PoolRef(self.statements, self.statements.append(pool))

    def comment(self, text: Arg) -> "NinjaDocument":
        return self._add(Comment(text))

    def variable(self, name: Arg, value: Arg) -> "NinjaDocument":
        return self._add(Variable(name, value))

    def defaults(self, outputs: Args) -> "NinjaDocument":
        return self._add(Default(outputs))

    def subninja(self, path: Arg) -> "NinjaDocument":
        return self._add(Subninja(path))

    def include(self, path: Arg) -> "NinjaDocument":
        return self._add(Include(path))

    def _add(self, statement: Statement) -> "NinjaDocument":
        self.statements.append(statement)
        return self

    def render(self) -> str:
        return DEFAULT_FORMATTER.format_document(self.statements.snapshot())

    def write(self, path: str | Path) -> Path:
        path = Path(path)
        output = self.render()
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(output)
        self.logger.info(f"Wrote {len(self.statements)} statements to {path}")
        return path

    def __str__(self) -> str:
        return self.render()


__all__ = ["NinjaDocument", "DocumentConfig", "DEFAULT_CONFIG"]
