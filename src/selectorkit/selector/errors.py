"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.model import PartKind

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base class for rejected selector appends."""


class DuplicateSingletonPart(SelectorError):
    """Raised when a second element or pseudo-element is appended."""

    def __init__(self, kind: PartKind) -> None:
        self.kind = kind
        super().__init__(DUPLICATE_MESSAGE)


class OutOfOrderPart(SelectorError):
    """Raised when a part is appended after a part that must follow it."""

    def __init__(self, previous: PartKind, attempted: PartKind) -> None:
        self.previous = previous
        self.attempted = attempted
        super().__init__(ORDER_MESSAGE)
