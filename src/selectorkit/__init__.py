"""selectorkit: CSS selector builder with rectangle and JSON helpers."""
from __future__ import annotations

from selectorkit.config import SelectorKitConfig
from selectorkit.selector import (
    CombinedSelector,
    DuplicateSingletonPart,
    OutOfOrderPart,
    PartKind,
    SelectorBuilder,
    SelectorError,
    combine,
    css_selector_builder,
)
from selectorkit.serialize import RehydrateError, from_json, get_json, parse_json
from selectorkit.shapes import Rectangle, make_rectangle

__version__ = "0.1.0"

__all__ = [
    "SelectorKitConfig",
    # selector
    "PartKind",
    "SelectorBuilder",
    "CombinedSelector",
    "combine",
    "css_selector_builder",
    "SelectorError",
    "DuplicateSingletonPart",
    "OutOfOrderPart",
    # json
    "get_json",
    "parse_json",
    "from_json",
    "RehydrateError",
    # shapes
    "Rectangle",
    "make_rectangle",
]
