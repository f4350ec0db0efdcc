"""Generic JSON encode/decode helpers for plain objects."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

from selectorkit.config import SelectorkitConfig

__all__ = ["from_json", "to_json"]

T = TypeVar("T")


def _encode_object(value: Any) -> Any:
    """``json.dumps`` fallback: dataclasses as field dicts, objects as attributes."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if hasattr(value, "__dict__") and not isinstance(value, type):
        return {k: v for k, v in vars(value).items() if not callable(v)}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any, *, config: SelectorkitConfig | None = None) -> str:
    """Return the JSON text for *value*.

    Output is compact (no whitespace after separators) unless the config sets
    an indent.
    """
    config = config or SelectorkitConfig()
    separators = (",", ":") if config.json_indent is None else (",", ": ")
    return json.dumps(
        value,
        default=_encode_object,
        indent=config.json_indent,
        separators=separators,
        sort_keys=config.sort_keys,
    )


def from_json(prototype: type[T], text: str) -> T:
    """Decode *text* into a new instance of *prototype*.

    The constructor is not called: the instance is allocated bare and every
    decoded key becomes an instance attribute, so keys the class does not
    declare are kept too.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object for {prototype.__name__}, got {type(data).__name__}"
        )
    instance = prototype.__new__(prototype)
    vars(instance).update(data)
    return instance
