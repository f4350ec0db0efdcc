from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorkitConfig:
    json_indent: int | None = None  # None emits compact JSON
    sort_keys: bool = False
    log_level: str = "WARNING"
