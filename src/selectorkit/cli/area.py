"""CLI command: selectorkit area -- rectangle area from dimensions or JSON."""

from __future__ import annotations

import json
import sys

import click

from selectorkit.config import SelectorKitConfig
from selectorkit.serialize import RehydrateError, from_json, get_json
from selectorkit.shapes import Rectangle, make_rectangle


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@click.command()
@click.argument("width", type=float, required=False)
@click.argument("height", type=float, required=False)
@click.option("--json", "json_text", default=None, help="Rectangle as a JSON object")
@click.option("--to-json", is_flag=True, help="Print the rectangle as JSON instead")
@click.pass_obj
def area(
    config: SelectorKitConfig | None,
    width: float | None,
    height: float | None,
    json_text: str | None,
    to_json: bool,
) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle (or one given via --json)."""
    if json_text is not None:
        if width is not None or height is not None:
            raise click.UsageError("Give either WIDTH and HEIGHT or --json, not both")
        try:
            rect = from_json(Rectangle, json_text)
        except (json.JSONDecodeError, RehydrateError) as exc:
            click.echo(f"Invalid rectangle JSON: {exc}", err=True)
            sys.exit(1)
        fields = vars(rect)
        if not all(_is_number(fields.get(name)) for name in ("width", "height")):
            click.echo(
                "Rectangle JSON needs numeric width and height, "
                f"got width={fields.get('width')!r} height={fields.get('height')!r}",
                err=True,
            )
            sys.exit(1)
    elif width is not None and height is not None:
        rect = make_rectangle(width, height)
    else:
        raise click.UsageError("Give WIDTH and HEIGHT, or --json")

    if to_json:
        click.echo(get_json(rect, config))
    else:
        click.echo(f"{rect.area():g}")
