"""Formatter turning statements into ninja text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from ninja_writer.kinds import StatementKind
from ninja_writer.utils import INDENT, indent

if TYPE_CHECKING:
    from ninja_writer.nodes import Build, Pool, Rule, Statement
    from ninja_writer.variable import Variable


@dataclass
class NinjaFormatter:
    indent: str = INDENT

    def format_document(self, statements: Iterable["Statement"]) -> str:
        lines: list[str] = []
        last = 0
        for statement in statements:
            if self._is_hidden(statement):
                continue
            # blank line between statement kinds, and before every rule
            next_ordinal = statement.kind.ordinal + 1
            if statement.kind is StatementKind.RULE or next_ordinal != last:
                lines.append("")
            last = next_ordinal
            lines.extend(self.format_statement(statement))
        return "".join(f"{line}\n" for line in lines)

    def format_statement(self, statement: "Statement") -> list[str]:
        kind = statement.kind
        if kind is StatementKind.COMMENT:
            return [f"# {statement.text}"]
        if kind is StatementKind.RULE:
            return self.format_rule(statement)
        if kind is StatementKind.BUILD:
            return self.format_build(statement)
        if kind is StatementKind.VARIABLE:
            return [statement.render()]
        if kind is StatementKind.DEFAULT:
            return [" ".join(["default", *statement.outputs])]
        if kind is StatementKind.SUBNINJA:
            return [f"subninja {statement.path}"]
        if kind is StatementKind.INCLUDE:
            return [f"include {statement.path}"]
        if kind is StatementKind.POOL:
            return self.format_pool(statement)
        raise ValueError(f"Unknown statement kind: {kind}")

    def format_rule(self, rule: "Rule") -> list[str]:
        return [f"rule {rule.name}", *self._format_variables(rule.variables)]

    def format_pool(self, pool: "Pool") -> list[str]:
        if pool.built_in:
            return []
        return [f"pool {pool.name}", *self._format_variables(pool.variables)]

    def format_build(self, build: "Build") -> list[str]:
        outputs = ["build", *build.outputs]
        outputs.extend(self._group("|", build.implicit_outputs))
        inputs = [build.rule_name, *build.dependencies]
        inputs.extend(self._group("|", build.implicit_dependencies))
        inputs.extend(self._group("||", build.order_only_dependencies))
        inputs.extend(self._group("|@", build.validations))
        header = f"{' '.join(outputs)}: {' '.join(inputs)}"
        return [header, *self._format_variables(build.variables)]

    def _format_variables(self, variables: Iterable["Variable"]) -> list[str]:
        return indent((variable.render() for variable in variables), self.indent)

    def _group(self, marker: str, items: Iterable[str]) -> list[str]:
        items = list(items)
        if not items:
            return []
        return [marker, *items]

    def _is_hidden(self, statement: "Statement") -> bool:
        return statement.kind is StatementKind.POOL and statement.built_in


DEFAULT_FORMATTER = NinjaFormatter()


__all__ = ["NinjaFormatter", "DEFAULT_FORMATTER"]
