"""Chainable CSS selector builder and combinator joins.

Usage::

    builder = css_selector_builder
    builder.id("main").class_("container").class_("editable").render()
    # '#main.container.editable'

    builder.combine(
        builder.element("div").id("main"),
        ">",
        builder.element("p").pseudo_class("first-child"),
    ).render()
    # 'div#main > p:first-child'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from selectorkit.selector.model import PartKind, SelectorFragment, advance

__all__ = [
    "Renderable",
    "SelectorBuilder",
    "CombinedSelector",
    "combine",
    "css_selector_builder",
]


@runtime_checkable
class Renderable(Protocol):
    """Anything that can produce selector text."""

    def render(self) -> str: ...


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator token (' ', '+', '~', '>')."""

    left: Renderable
    combinator: str
    right: Renderable

    def render(self) -> str:
        return f"{self.left.render()} {self.combinator} {self.right.render()}"

    def stringify(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()


def combine(left: Renderable, combinator: str, right: Renderable) -> CombinedSelector:
    """Join *left* and *right* with *combinator*, inserted verbatim."""
    return CombinedSelector(left=left, combinator=combinator, right=right)


@dataclass(frozen=True)
class SelectorBuilder:
    """Immutable builder for a simple selector.

    Every append returns a new builder, so a partially built selector can be
    reused as the base of several others.
    """

    fragment: SelectorFragment = field(default_factory=SelectorFragment)

    def _append(self, kind: PartKind, value: str) -> SelectorBuilder:
        return SelectorBuilder(fragment=advance(self.fragment, kind, value))

    # --- appends --------------------------------------------------------------

    def append_type(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.TYPE, value)

    def append_id(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.ID, value)

    def append_class(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.CLASS, value)

    def append_attribute(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.ATTRIBUTE, value)

    def append_pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.PSEUDO_CLASS, value)

    def append_pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.PSEUDO_ELEMENT, value)

    def append(self, kind: PartKind, value: str) -> SelectorBuilder:
        """Append a part whose kind is only known at runtime."""
        return self._append(kind, value)

    # short names, matching CSS vocabulary
    element = append_type
    id = append_id
    class_ = append_class
    attr = append_attribute
    pseudo_class = append_pseudo_class
    pseudo_element = append_pseudo_element

    # --- combinators ----------------------------------------------------------

    def combine(
        self, left: Renderable, combinator: str, right: Renderable
    ) -> CombinedSelector:
        return combine(left, combinator, right)

    # --- rendering ------------------------------------------------------------

    @property
    def last_kind(self) -> PartKind | None:
        return self.fragment.last_kind

    def render(self) -> str:
        """Return the selector text built so far ("" when nothing was appended)."""
        return self.fragment.text

    def stringify(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()


css_selector_builder = SelectorBuilder()
