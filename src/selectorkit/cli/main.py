"""selectorkit CLI entry point: Click group with subcommands."""

import logging

import click

from selectorkit import __version__
from selectorkit.config import SelectorKitConfig


class _EchoHandler(logging.Handler):
    """Send log records to whatever stderr click currently writes to."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def _configure_logging(level: str) -> None:
    log = logging.getLogger("selectorkit")
    if not any(isinstance(h, _EchoHandler) for h in log.handlers):
        handler = _EchoHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        log.addHandler(handler)
    log.setLevel(level)


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """selectorkit - build CSS selectors and work with rectangle JSON."""
    config = SelectorKitConfig(log_level="DEBUG" if verbose else "WARNING")
    _configure_logging(config.log_level)
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.area import area  # noqa: E402
from selectorkit.cli.build import build  # noqa: E402

cli.add_command(build)
cli.add_command(area)
