"""The statement arena of a document and the handles pointing into it.

A :class:`StatementList` is append-only: a statement keeps its slot for the
life of the list. Handles are ``(list, index)`` pairs, so any number of them
can alias one statement and every change made through them lands on the
statement stored in the list.
"""

from __future__ import annotations

import logging
from typing import ClassVar, Iterator

from ninja_writer.args import Arg, Args
from ninja_writer.errors import StatementKindError
from ninja_writer.nodes import Build, Pool, Rule, Statement
from ninja_writer.ownership import AddOnlyList, Ownership
from ninja_writer.variable import BuildVariables, RuleVariables, Variable, Variables


class StatementList:
    def __init__(
        self,
        ownership: Ownership = Ownership.SINGLE,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
    ):
        self.ownership = ownership
        self.logger = logger or logging.getLogger(__name__)
        self._statements: AddOnlyList[Statement] = AddOnlyList(ownership=ownership, blocking=True)

    def append(self, statement: Statement) -> int:
        if isinstance(statement, (Rule, Build, Pool)):
            statement.adopt(self.ownership)
        index = self._statements.add(statement)
        self.logger.debug(f"Appended {statement.kind.name.lower()} statement at index {index}")
        return index

    def snapshot(self) -> tuple[Statement, ...]:
        return self._statements.snapshot()

    def __getitem__(self, index: int) -> Statement:
        return self._statements[index]

    def __len__(self) -> int:
        return len(self._statements)

    def __iter__(self) -> Iterator[Statement]:
        return iter(self._statements)


class StatementRef:
    expected: ClassVar[type | None] = None

    def __init__(self, statements: StatementList, index: int):
        self.statements = statements
        self.index = index

    @property
    def statement(self) -> Statement:
        statement = self.statements[self.index]
        if self.expected is not None and not isinstance(statement, self.expected):
            raise StatementKindError(self.expected.__name__, statement, self.index)
        return statement

    def add(self, statement: Statement) -> int:
        """Append ``statement`` to the list this handle points into."""
        return self.statements.append(statement)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StatementRef):
            return NotImplemented
        return self.statements is other.statements and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self.statements), self.index))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(index={self.index}, statement={self.statement!r})"


class RuleRef(StatementRef, RuleVariables):
    expected = Rule

    @property
    def node(self) -> Rule:
        return self.statement

    @property
    def name(self) -> str:
        return self.node.name

    @property
    def variables(self) -> AddOnlyList[Variable]:
        return self.node.variables

    def _add_variable(self, variable: Variable) -> None:
        self.node.variables.add(variable)

    def build(self, outputs: Args) -> "BuildRef":
        """Create a build edge using this rule and append it to the document."""
        build = Build(self, outputs, ownership=self.statements.ownership)
        return BuildRef(self.statements, self.add(build))


class BuildRef(StatementRef, BuildVariables):
    expected = Build

    @property
    def node(self) -> Build:
        return self.statement

    @property
    def rule_name(self) -> str:
        return self.node.rule_name

    @property
    def variables(self) -> AddOnlyList[Variable]:
        return self.node.variables

    def _add_variable(self, variable: Variable) -> None:
        self.node.variables.add(variable)

    def _build_node(self) -> Build:
        return self.node


class PoolRef(StatementRef, Variables):
    expected = Pool

    @property
    def node(self) -> Pool:
        return self.statement

    @property
    def name(self) -> str:
        return self.node.name

    @property
    def variables(self) -> AddOnlyList[Variable]:
        return self.node.variables

    def _add_variable(self, variable: Variable) -> None:
        self.node.variables.add(variable)

    def rule(self, name: Arg, command: Arg) -> RuleRef:
        """Create a rule running in this pool and append it to the document."""
        rule = Rule(name, command, ownership=self.statements.ownership).pool(self)
        return RuleRef(self.statements, self.add(rule))


__all__ = ["StatementList", "StatementRef", "RuleRef", "BuildRef", "PoolRef"]
