"""CLI command: selectorkit build -- assemble a simple selector from parts."""

from __future__ import annotations

import sys

import click

from selectorkit.selector import PartKind, SelectorBuilder, SelectorError

_KINDS = {
    "element": PartKind.TYPE,
    "id": PartKind.ID,
    "class": PartKind.CLASS,
    "attr": PartKind.ATTRIBUTE,
    "pseudo-class": PartKind.PSEUDO_CLASS,
    "pseudo-element": PartKind.PSEUDO_ELEMENT,
}


def _parse_part(raw: str) -> tuple[PartKind, str]:
    kind_name, sep, value = raw.partition("=")
    if not sep or kind_name not in _KINDS:
        raise click.BadParameter(
            f"expected KIND=VALUE with KIND one of {', '.join(_KINDS)}, got {raw!r}",
            param_hint="PARTS",
        )
    return _KINDS[kind_name], value


@click.command()
@click.argument("parts", nargs=-1, required=True)
def build(parts: tuple[str, ...]) -> None:
    """Build a selector from KIND=VALUE parts, applied in the given order.

    Example: selectorkit build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    parsed = [_parse_part(raw) for raw in parts]

    selector = SelectorBuilder()
    try:
        for kind, value in parsed:
            selector = selector.append(kind, value)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.render())
