from typing import Iterable, TypedDict, TypeVar

T = TypeVar("T", bound=TypedDict("T", {}))
U = TypeVar("U", bound=TypedDict("U", {}))

INDENT = "  "


def resolve_config(config: T, default_config: U) -> U:
    _config = default_config.copy()
    if config:
        for key in _config:
            if key in config:
                _config[key] = config[key]
    return _config


def indent(lines: Iterable[str], prefix: str = INDENT) -> list[str]:
    return [f"{prefix}{line}" for line in lines]
