from selectorkit.selector.builder import (
    CombinedSelector,
    Renderable,
    SelectorBuilder,
    combine,
    css_selector_builder,
)
from selectorkit.selector.errors import DuplicateSingletonPart, OutOfOrderPart, SelectorError
from selectorkit.selector.model import SINGLETON_KINDS, PartKind, SelectorFragment, advance

__all__ = [
    "PartKind",
    "SINGLETON_KINDS",
    "SelectorFragment",
    "advance",
    "SelectorBuilder",
    "CombinedSelector",
    "Renderable",
    "combine",
    "css_selector_builder",
    "SelectorError",
    "DuplicateSingletonPart",
    "OutOfOrderPart",
]
