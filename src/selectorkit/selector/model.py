"""Selector model: part kinds, immutable fragments, and the append transition."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum

from selectorkit.selector.errors import DuplicateSingletonPart, OutOfOrderPart

__all__ = ["PartKind", "SINGLETON_KINDS", "SelectorFragment", "advance"]

logger = logging.getLogger(__name__)


class PartKind(IntEnum):
    """Category of a simple selector part, in the order parts must appear."""

    TYPE = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def label(self) -> str:
        return _LABELS[self]

    def affix(self, token: str) -> str:
        """Wrap *token* in the punctuation this kind renders with."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{token}{suffix}"


_LABELS = {
    PartKind.TYPE: "element",
    PartKind.ID: "id",
    PartKind.CLASS: "class",
    PartKind.ATTRIBUTE: "attribute",
    PartKind.PSEUDO_CLASS: "pseudo-class",
    PartKind.PSEUDO_ELEMENT: "pseudo-element",
}

_AFFIXES = {
    PartKind.TYPE: ("", ""),
    PartKind.ID: ("#", ""),
    PartKind.CLASS: (".", ""),
    PartKind.ATTRIBUTE: ("[", "]"),
    PartKind.PSEUDO_CLASS: (":", ""),
    PartKind.PSEUDO_ELEMENT: ("::", ""),
}

# Id is order-checked only; it may repeat.
SINGLETON_KINDS = frozenset({PartKind.TYPE, PartKind.PSEUDO_ELEMENT})


@dataclass(frozen=True)
class SelectorFragment:
    """Accumulated text of a simple selector and the kind appended last.

    ``singletons`` holds the element/pseudo-element kinds already present
    anywhere in the chain.
    """

    last_kind: PartKind | None = None
    text: str = ""
    singletons: frozenset[PartKind] = frozenset()

    @property
    def is_empty(self) -> bool:
        return self.last_kind is None

    def render(self) -> str:
        return self.text


def advance(fragment: SelectorFragment, kind: PartKind, token: str) -> SelectorFragment:
    """Return a new fragment with *token* appended as a part of *kind*.

    Raises :class:`DuplicateSingletonPart` when *kind* is an element or
    pseudo-element that is already present, and :class:`OutOfOrderPart` when
    *kind* sorts before the last appended part.  *fragment* is never modified.
    """
    last = fragment.last_kind
    if kind in fragment.singletons:
        logger.debug("Rejected duplicate %s part %r in %r", kind.label, token, fragment.text)
        raise DuplicateSingletonPart(kind)
    if last is not None and kind < last:
        logger.debug(
            "Rejected %s part %r after %s in %r", kind.label, token, last.label, fragment.text
        )
        raise OutOfOrderPart(last, kind)
    singletons = fragment.singletons
    if kind in SINGLETON_KINDS:
        singletons = singletons | {kind}
    return SelectorFragment(
        last_kind=kind, text=fragment.text + kind.affix(token), singletons=singletons
    )
