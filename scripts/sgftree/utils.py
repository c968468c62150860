from typing import TypedDict, TypeVar

T = TypeVar("T", bound=TypedDict("T", {}))
U = TypeVar("U", bound=TypedDict("U", {}))


def resolve_config(config: T | None, default_config: U) -> U:
    unknown = set(config or {}) - set(default_config)
    if unknown:
        raise KeyError(f"Unknown config keys: {sorted(unknown)}")
    _config = default_config.copy()
    for key, value in (config or {}).items():
        _config[key] = value
    return _config
