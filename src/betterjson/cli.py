"""Command line tools to look at betterjson documents"""

from __future__ import annotations

import json
import sys
from typing import Any, Iterator, TextIO

import click

from betterjson import config, envelope, plugins, text, utils

PathElt = str | int


def iter_envelopes(
    node: Any, marker_key: str, path: tuple[PathElt, ...] = ()
) -> Iterator[tuple[tuple[PathElt, ...], envelope.Envelope]]:
    """Find all the envelopes in a parsed document, outermost first."""
    if envelope.is_envelope(node, marker_key):
        env = envelope.from_node(node, marker_key)
        yield path, env
        yield from iter_envelopes(env.value, marker_key, (*path, "value"))
    elif isinstance(node, dict):
        for k, v in node.items():
            yield from iter_envelopes(v, marker_key, (*path, k))
    elif isinstance(node, list):
        for idx, v in enumerate(node):
            yield from iter_envelopes(v, marker_key, (*path, idx))


def format_path(path: tuple[PathElt, ...]) -> str:
    """
    >>> format_path(())
    '$'
    >>> format_path(("a", 0, "value"))
    '$.a[0].value'
    """
    return "$" + "".join(
        f"[{elt}]" if isinstance(elt, int) else f".{elt}" for elt in path
    )


def _read(fd: TextIO) -> Any:
    try:
        return json.load(fd)
    except ValueError as e:
        raise click.ClickException(f"{fd.name}: invalid JSON document ({e})")


@click.group()
def cli() -> None:
    pass


@cli.command()
@click.argument("file", type=click.File("r"))
@click.option(
    "--marker",
    default=config.DEFAULT_MARKER_KEY,
    show_default=True,
    help="Key used to identify serialized objects.",
)
def inspect(file: TextIO, marker: str) -> None:
    """List the serialized objects in a JSON document"""
    known = {plugin.type_id for plugin in plugins.BUNDLED}
    retcode = 0
    for path, env in iter_envelopes(_read(file), marker):
        click.echo(
            f"{format_path(path)}: {utils.cram(repr(env.type), 40)} "
            f"(version={env.version!r}) ",
            nl=False,
        )
        if not env.is_supported():
            click.secho("UNSUPPORTED VERSION", fg="red")
            retcode = 1
        elif type(env.type) is str and env.type in known:
            click.secho("OK", fg="green")
        else:
            click.secho("NO PLUGIN", fg="yellow")
    sys.exit(retcode)


@cli.command()
@click.argument("file", type=click.File("r"))
@click.option("--indent", default=2, show_default=True, type=click.IntRange(0))
def reindent(file: TextIO, indent: int) -> None:
    """Print a JSON document with a new indentation"""
    click.echo(text.dump_text(_read(file), indent=indent))


if __name__ == "__main__":
    cli()
