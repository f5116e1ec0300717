from enum import Enum


class StatementKind(Enum):
    """Top-level statement kinds, valued by their layout ordinal."""

    COMMENT = 0
    RULE = 1
    BUILD = 2
    VARIABLE = 3
    DEFAULT = 4
    SUBNINJA = 5
    INCLUDE = 6
    POOL = 7

    @property
    def ordinal(self) -> int:
        return self.value
