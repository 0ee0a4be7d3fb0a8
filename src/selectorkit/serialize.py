"""JSON helpers: encode values to text and rehydrate typed objects from it."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from selectorkit.config import SelectorKitConfig

__all__ = ["RehydrateError", "get_json", "parse_json", "from_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RehydrateError(TypeError):
    """Raised when JSON text does not decode to an object."""


def _default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def get_json(value: Any, config: SelectorKitConfig | None = None) -> str:
    """Return the JSON representation of *value*.

    Dataclass instances are written as their field mapping.
    """
    cfg = config or SelectorKitConfig()
    separators = (",", ":") if cfg.compact_json and cfg.indent is None else None
    return json.dumps(
        value,
        default=_default,
        sort_keys=cfg.sort_keys,
        indent=cfg.indent,
        separators=separators,
    )


def parse_json(text: str) -> Any:
    return json.loads(text)


def from_json(cls: type[T], text: str) -> T:
    """Build an instance of *cls* from the JSON object in *text*.

    The decoded keys become instance attributes as-is; ``cls.__init__`` is not
    called, so the result carries the methods of *cls* and whatever fields the
    JSON provided.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise RehydrateError(
            f"Cannot rehydrate {cls.__name__} from JSON {type(data).__name__}"
        )
    instance = cls.__new__(cls)
    if not hasattr(instance, "__dict__"):
        raise RehydrateError(
            f"Cannot rehydrate {cls.__name__}: instances have no __dict__ (uses __slots__)"
        )
    vars(instance).update(data)
    logger.debug("Rehydrated %s with fields %s", cls.__name__, sorted(data))
    return instance
