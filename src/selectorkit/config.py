from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorKitConfig:
    compact_json: bool = True  # '[1,2,3]' rather than '[1, 2, 3]'
    sort_keys: bool = False
    indent: int | None = None
    log_level: str = "WARNING"
