"""Variables, and the mixins that attach them to rules, builds and pools."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Protocol, Self

from ninja_writer.args import Arg, Args, as_args, to_arg
from ninja_writer.kinds import StatementKind

if TYPE_CHECKING:
    from ninja_writer.nodes import Build


@dataclass(frozen=True, slots=True, init=False)
class Variable:
    """A ``name = value`` declaration.

    Nothing is escaped, values containing ``$`` must be escaped by the caller
    (see :func:`ninja_writer.escape.escape`).
    """

    kind: ClassVar[StatementKind] = StatementKind.VARIABLE

    name: str
    value: str

    def __init__(self, name: Arg, value: Arg):
        object.__setattr__(self, "name", to_arg(name))
        object.__setattr__(self, "value", to_arg(value))

    def render(self) -> str:
        return f"{self.name} = {self.value}"

    def __str__(self) -> str:
        return self.render()


class Named(Protocol):
    name: str


class Variables:
    def _add_variable(self, variable: Variable) -> None:
        raise NotImplementedError

    def variable(self, name: Arg, value: Arg) -> Self:
        """Attach a variable. Duplicate names are kept, ninja allows them."""
        self._add_variable(Variable(name, value))
        return self


class RuleVariables(Variables):
    """Well-known variables shared by ``rule`` and ``build`` blocks.

    See https://ninja-build.org/manual.html#ref_rule
    """

    def depfile(self, depfile: Arg) -> Self:
        return self.variable("depfile", depfile)

    def deps_gcc(self) -> Self:
        return self.variable("deps", "gcc")

    def deps_msvc(self) -> Self:
        return self.variable("deps", "msvc")

    def deps_msvc_prefix(self, msvc_deps_prefix: Arg) -> Self:
        return self.deps_msvc().variable("msvc_deps_prefix", msvc_deps_prefix)

    def description(self, description: Arg) -> Self:
        return self.variable("description", description)

    def generator(self) -> Self:
        return self.variable("generator", "1")

    def in_newline(self, in_newline: Arg) -> Self:
        return self.variable("in_newline", in_newline)

    def restat(self) -> Self:
        return self.variable("restat", "1")

    def rspfile(self, rspfile: Arg, rspfile_content: Arg) -> Self:
        return self.variable("rspfile", rspfile).variable("rspfile_content", rspfile_content)

    def pool_console(self) -> Self:
        return self.variable("pool", "console")

    def pool(self, pool: Named) -> Self:
        return self.variable("pool", pool.name)


class BuildVariables(RuleVariables):
    """Input and output lists of a ``build`` statement."""

    def _build_node(self) -> "Build":
        raise NotImplementedError

    def with_(self, inputs: Args) -> Self:
        """Add explicit dependencies (``build out: rule <inputs>``)."""
        self._build_node().dependencies.extend(as_args(inputs))
        return self

    def with_implicit(self, inputs: Args) -> Self:
        self._build_node().implicit_dependencies.extend(as_args(inputs))
        return self

    def with_order_only(self, inputs: Args) -> Self:
        self._build_node().order_only_dependencies.extend(as_args(inputs))
        return self

    def with_validations(self, validations: Args) -> Self:
        """Add validations (``|@``), built whenever this edge is built."""
        self._build_node().validations.extend(as_args(validations))
        return self

    def output_implicit(self, outputs: Args) -> Self:
        self._build_node().implicit_outputs.extend(as_args(outputs))
        return self

    def dyndep(self, dyndep: Arg) -> Self:
        return self.variable("dyndep", dyndep)


__all__ = ["Variable", "Variables", "RuleVariables", "BuildVariables"]
