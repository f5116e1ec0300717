"""JSON manifests describing a ninja file, and their conversion into documents."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Callable, Literal, Union

from pydantic import BaseModel, Field

from ninja_writer.document import DocumentConfig, NinjaDocument
from ninja_writer.errors import ManifestError
from ninja_writer.escape import escape_build, escape_path
from ninja_writer.nodes import Pool
from ninja_writer.statements import BuildRef, PoolRef, RuleRef


class VariableSpec(BaseModel):
    name: str
    value: str


class BuildSpec(BaseModel):
    outputs: list[str]
    inputs: list[str] = Field(default_factory=list)
    implicit_inputs: list[str] = Field(default_factory=list)
    order_only_inputs: list[str] = Field(default_factory=list)
    validations: list[str] = Field(default_factory=list)
    implicit_outputs: list[str] = Field(default_factory=list)
    dyndep: str | None = None
    variables: list[VariableSpec] = Field(default_factory=list)


class RuleStatement(BaseModel):
    kind: Literal["rule"]
    name: str
    command: str
    pool: str | None = None
    variables: list[VariableSpec] = Field(default_factory=list)
    builds: list[BuildSpec] = Field(default_factory=list)


class BuildStatement(BuildSpec):
    kind: Literal["build"]
    rule: str


class PhonyStatement(BuildSpec):
    kind: Literal["phony"]


class PoolStatement(BaseModel):
    kind: Literal["pool"]
    name: str
    depth: int = Field(ge=0)
    variables: list[VariableSpec] = Field(default_factory=list)


class VariableStatement(VariableSpec):
    kind: Literal["variable"]


class CommentStatement(BaseModel):
    kind: Literal["comment"]
    text: str


class DefaultStatement(BaseModel):
    kind: Literal["default"]
    outputs: list[str]


class SubninjaStatement(BaseModel):
    kind: Literal["subninja"]
    path: str


class IncludeStatement(BaseModel):
    kind: Literal["include"]
    path: str


ManifestStatement = Annotated[
    Union[
        RuleStatement,
        BuildStatement,
        PhonyStatement,
        PoolStatement,
        VariableStatement,
        CommentStatement,
        DefaultStatement,
        SubninjaStatement,
        IncludeStatement,
    ],
    Field(discriminator="kind"),
]


class Manifest(BaseModel):
    escape: bool = False
    thread_safe: bool = False
    statements: list[ManifestStatement] = Field(default_factory=list)


def load_manifest(path: str | Path) -> Manifest:
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Manifest does not exist: {path}")
    return Manifest.model_validate_json(path.read_text(encoding="utf-8"))


class ManifestBuilder:
    """Replays manifest statements onto a :class:`NinjaDocument` in order."""

    def __init__(self, manifest: Manifest, config: DocumentConfig | None = None):
        self.manifest = manifest
        self.config: DocumentConfig = dict(config or {})
        if manifest.thread_safe:
            self.config["thread_safe"] = True
        self.rules: dict[str, RuleRef] = {}
        self.pools: dict[str, Pool | PoolRef] = {}
        self._output: Callable[[str], str] = escape_build if manifest.escape else _unchanged
        self._input: Callable[[str], str] = escape_path if manifest.escape else _unchanged

    def build(self) -> NinjaDocument:
        document = NinjaDocument(self.config)
        self.pools = {document.console_pool.name: document.console_pool}
        for position, statement in enumerate(self.manifest.statements):
            self._add_statement(document, statement, position)
        return document

    def _add_statement(self, document: NinjaDocument, statement: ManifestStatement, position: int) -> None:
        if isinstance(statement, RuleStatement):
            self._add_rule(document, statement, position)
        elif isinstance(statement, BuildStatement):
            self._configure_build(self._add_build(document, statement, position), statement)
        elif isinstance(statement, PhonyStatement):
            self._configure_build(document.phony(self._outputs(statement.outputs)), statement)
        elif isinstance(statement, PoolStatement):
            pool = document.pool(statement.name, statement.depth)
            for variable in statement.variables:
                pool.variable(variable.name, variable.value)
            self.pools[statement.name] = pool
        elif isinstance(statement, VariableStatement):
            document.variable(statement.name, statement.value)
        elif isinstance(statement, CommentStatement):
            document.comment(statement.text)
        elif isinstance(statement, DefaultStatement):
            document.defaults(self._inputs(statement.outputs))
        elif isinstance(statement, SubninjaStatement):
            document.subninja(self._input(statement.path))
        elif isinstance(statement, IncludeStatement):
            document.include(self._input(statement.path))
        else:
            raise ManifestError(f"Unsupported statement {type(statement).__name__}", position)

    def _add_rule(self, document: NinjaDocument, statement: RuleStatement, position: int) -> None:
        rule = document.rule(statement.name, statement.command)
        if statement.pool is not None:
            pool = self.pools.get(statement.pool)
            if pool is None:
                raise ManifestError(f"Rule '{statement.name}' uses undeclared pool '{statement.pool}'", position)
            rule.pool(pool)
        for variable in statement.variables:
            rule.variable(variable.name, variable.value)
        self.rules[statement.name] = rule
        for build in statement.builds:
            self._configure_build(rule.build(self._outputs(build.outputs)), build)

    def _add_build(self, document: NinjaDocument, statement: BuildStatement, position: int) -> BuildRef:
        outputs = self._outputs(statement.outputs)
        if statement.rule == document.phony_rule.name:
            return document.phony(outputs)
        rule = self.rules.get(statement.rule)
        if rule is None:
            raise ManifestError(f"Build uses undeclared rule '{statement.rule}'", position)
        return rule.build(outputs)

    def _configure_build(self, build: BuildRef, spec: BuildSpec) -> None:
        build.with_(self._inputs(spec.inputs))
        build.with_implicit(self._inputs(spec.implicit_inputs))
        build.with_order_only(self._inputs(spec.order_only_inputs))
        build.with_validations(self._inputs(spec.validations))
        build.output_implicit(self._outputs(spec.implicit_outputs))
        if spec.dyndep is not None:
            build.dyndep(spec.dyndep)
        for variable in spec.variables:
            build.variable(variable.name, variable.value)

    def _outputs(self, values: list[str]) -> list[str]:
        return [self._output(value) for value in values]

    def _inputs(self, values: list[str]) -> list[str]:
        return [self._input(value) for value in values]


def _unchanged(text: str) -> str:
    return text


def build_document(manifest: Manifest, config: DocumentConfig | None = None) -> NinjaDocument:
    return ManifestBuilder(manifest, config).build()


__all__ = [
    "VariableSpec",
    "BuildSpec",
    "RuleStatement",
    "BuildStatement",
    "PhonyStatement",
    "PoolStatement",
    "VariableStatement",
    "CommentStatement",
    "DefaultStatement",
    "SubninjaStatement",
    "IncludeStatement",
    "ManifestStatement",
    "Manifest",
    "ManifestBuilder",
    "load_manifest",
    "build_document",
]
