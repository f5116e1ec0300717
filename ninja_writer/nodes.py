"""Statement nodes of a ninja file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Union

from ninja_writer.args import Arg, Args, as_args, to_arg
from ninja_writer.formatter import DEFAULT_FORMATTER
from ninja_writer.kinds import StatementKind
from ninja_writer.ownership import AddOnlyList, Ownership
from ninja_writer.variable import BuildVariables, RuleVariables, Variable, Variables

if TYPE_CHECKING:
    from ninja_writer.document import NinjaDocument
    from ninja_writer.statements import PoolRef, RuleRef


@dataclass(frozen=True, slots=True, init=False)
class Comment:
    kind: ClassVar[StatementKind] = StatementKind.COMMENT

    text: str

    def __init__(self, text: Arg):
        object.__setattr__(self, "text", to_arg(text))


@dataclass(frozen=True, slots=True, init=False)
class Default:
    kind: ClassVar[StatementKind] = StatementKind.DEFAULT

    outputs: tuple[str, ...]

    def __init__(self, outputs: Args):
        object.__setattr__(self, "outputs", tuple(as_args(outputs)))


@dataclass(frozen=True, slots=True, init=False)
class Subninja:
    kind: ClassVar[StatementKind] = StatementKind.SUBNINJA

    path: str

    def __init__(self, path: Arg):
        object.__setattr__(self, "path", to_arg(path))


@dataclass(frozen=True, slots=True, init=False)
class Include:
    """Like ``subninja`` but without a new scope."""

    kind: ClassVar[StatementKind] = StatementKind.INCLUDE

    path: str

    def __init__(self, path: Arg):
        object.__setattr__(self, "path", to_arg(path))


@dataclass(init=False, eq=False)
class Rule(RuleVariables):
    """A ``rule`` declaration. The first variable is always ``command``.

    Build edges created from a rule keep only its name, the rule body is
    never copied.
    """

    kind: ClassVar[StatementKind] = StatementKind.RULE

    name: str
    variables: AddOnlyList[Variable]

    def __init__(self, name: Arg, command: Arg, ownership: Ownership = Ownership.SINGLE):
        self.name = to_arg(name)
        self.variables = AddOnlyList(ownership=ownership)
        self.variable("command", command)

    def _add_variable(self, variable: Variable) -> None:
        self.variables.add(variable)

    def add_to(self, document: "NinjaDocument") -> "RuleRef":
        return document.add_rule(self)

    def adopt(self, ownership: Ownership) -> None:
        self.variables = self.variables.adopt(ownership)

    def render(self) -> str:
        return "".join(f"{line}\n" for line in DEFAULT_FORMATTER.format_rule(self))

    def __str__(self) -> str:
        return self.render()


@dataclass(init=False, eq=False)
class Build(BuildVariables):
    """A ``build`` edge.

    https://ninja-build.org/manual.html#_build_statements
    """

    kind: ClassVar[StatementKind] = StatementKind.BUILD

    rule_name: str
    outputs: AddOnlyList[str]
    implicit_outputs: AddOnlyList[str]
    dependencies: AddOnlyList[str]
    implicit_dependencies: AddOnlyList[str]
    order_only_dependencies: AddOnlyList[str]
    validations: AddOnlyList[str]
    variables: AddOnlyList[Variable]

    _lists: ClassVar[tuple[str, ...]] = (
        "outputs",
        "implicit_outputs",
        "dependencies",
        "implicit_dependencies",
        "order_only_dependencies",
        "validations",
        "variables",
    )

    def __init__(self, rule: "Rule | RuleRef", outputs: Args, ownership: Ownership = Ownership.SINGLE):
        self.rule_name = rule.name
        for name in self._lists:
            setattr(self, name, AddOnlyList(ownership=ownership))
        self.outputs.extend(as_args(outputs))

    def _add_variable(self, variable: Variable) -> None:
        self.variables.add(variable)

    def _build_node(self) -> "Build":
        return self

    def adopt(self, ownership: Ownership) -> None:
        for name in self._lists:
            setattr(self, name, getattr(self, name).adopt(ownership))

    def render(self) -> str:
        return "".join(f"{line}\n" for line in DEFAULT_FORMATTER.format_build(self))

    def __str__(self) -> str:
        return self.render()


@dataclass(init=False, eq=False)
class Pool(Variables):
    """A ``pool`` declaration, limiting how many jobs of its rules run at once.

    Built-in pools (``console``) exist in ninja without a declaration and
    are never written out.
    """

    kind: ClassVar[StatementKind] = StatementKind.POOL

    name: str
    variables: AddOnlyList[Variable]
    built_in: bool = False

    def __init__(self, name: Arg, depth: int | Arg, ownership: Ownership = Ownership.SINGLE, built_in: bool = False):
        self.name = to_arg(name)
        self.variables = AddOnlyList(ownership=ownership)
        self.built_in = built_in
        self.variable("depth", to_arg(depth))

    def _add_variable(self, variable: Variable) -> None:
        self.variables.add(variable)

    def add_to(self, document: "NinjaDocument") -> "PoolRef":
        return document.add_pool(self)

    def adopt(self, ownership: Ownership) -> None:
        self.variables = self.variables.adopt(ownership)

    def render(self) -> str:
        return "".join(f"{line}\n" for line in DEFAULT_FORMATTER.format_pool(self))

    def __str__(self) -> str:
        return self.render()


Statement = Union[Comment, Rule, Build, Variable, Default, Subninja, Include, Pool]


def ordinal(statement: Statement) -> int:
    return statement.kind.ordinal


__all__ = [
    "Comment",
    "Default",
    "Subninja",
    "Include",
    "Rule",
    "Build",
    "Pool",
    "Statement",
    "ordinal",
]
