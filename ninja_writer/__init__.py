"""Writer for ninja build files."""

from .escape import escape, escape_build, escape_path
from .args import as_args, to_arg
from .errors import BorrowError, ManifestError, NinjaWriterError, StatementKindError
from .kinds import StatementKind
from .ownership import AddOnlyList, Ownership
from .variable import Variable
from .nodes import Build, Comment, Default, Include, Pool, Rule, Statement, Subninja, ordinal
from .statements import BuildRef, PoolRef, RuleRef, StatementList, StatementRef
from .formatter import NinjaFormatter
from .document import DocumentConfig, NinjaDocument
from .manifest import Manifest, build_document, load_manifest

__all__ = [
    "escape",
    "escape_build",
    "escape_path",
    "as_args",
    "to_arg",
    "BorrowError",
    "ManifestError",
    "NinjaWriterError",
    "StatementKindError",
    "StatementKind",
    "AddOnlyList",
    "Ownership",
    "Variable",
    "Build",
    "Comment",
    "Default",
    "Include",
    "Pool",
    "Rule",
    "Statement",
    "Subninja",
    "ordinal",
    "BuildRef",
    "PoolRef",
    "RuleRef",
    "StatementList",
    "StatementRef",
    "NinjaFormatter",
    "DocumentConfig",
    "NinjaDocument",
    "Manifest",
    "build_document",
    "load_manifest",
]
