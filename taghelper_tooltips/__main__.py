"""CLI entry point using Click"""

import json
import logging
import sys

import click
from lsprotocol import types as lsp

from . import __version__
from .completion.capabilities import StaticCapabilityProvider
from .completion.cref import resolve_cref
from .completion.formatter import TagHelperDescriptionFactory
from .completion.models import AttributeDescription, ElementDescription
from .completion.names import reduce_member_name, reduce_type_name
from .completion.summary import clean_summary_content, try_extract_summary

_DESCRIPTION_KINDS = {
    "element": ElementDescription,
    "attribute": AttributeDescription,
}


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--format",
    type=click.Choice(["markdown", "plaintext"]),
    default="markdown",
    help="Documentation format the client accepts",
)
@click.option("--verbose", is_flag=True, help="Log fallback decisions to stderr")
@click.pass_context
def cli(ctx, format, verbose):
    """taghelper-tooltips: Readable tooltips for Razor tag helpers

    Examples:
      taghelper-tooltips describe entries.json
      taghelper-tooltips --format plaintext describe - < entries.json
      taghelper-tooltips cref "T:System.Collections.Generic.List{System.String}"
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)
    ctx.ensure_object(dict)
    ctx.obj["format"] = format


@cli.command()
@click.argument("source", type=click.File("r"))
@click.option("--json", "as_json", is_flag=True, help="Print text and kind as JSON")
@click.pass_context
def describe(ctx, source, as_json):
    """Render a tooltip from a JSON description

    SOURCE holds {"kind": "element" | "attribute", "entries": [...]};
    use - to read from stdin.
    """
    try:
        data = json.load(source)
        description_cls = _DESCRIPTION_KINDS[data.get("kind", "element")]
        description = description_cls.from_dicts(data["entries"])
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    fmt = lsp.MarkupKind(ctx.obj["format"])
    factory = TagHelperDescriptionFactory(StaticCapabilityProvider((fmt,)))
    result = factory.try_create_description(description)
    if result is None:
        click.echo("Error: no entries to describe", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        click.echo(result.text)


@cli.command()
@click.argument("name")
def reduce_type_cmd(name):
    """Reduce a fully qualified type name"""
    click.echo(reduce_type_name(name))


@cli.command()
@click.argument("name")
def reduce_member_cmd(name):
    """Reduce a fully qualified member name"""
    click.echo(reduce_member_name(name))


@cli.command()
@click.argument("token")
def cref(token):
    """Resolve a cref token (e.g. T:Foo.Bar)"""
    click.echo(resolve_cref(token))


@cli.command()
def summary():
    """Extract and clean the summary of documentation read from stdin"""
    text = try_extract_summary(click.get_text_stream("stdin").read())
    if text is None:
        click.echo("Error: no summary found", err=True)
        sys.exit(1)
    click.echo(clean_summary_content(text))


# Rename commands to match expected names
cli.add_command(reduce_type_cmd, name="reduce-type")
cli.add_command(reduce_member_cmd, name="reduce-member")


if __name__ == "__main__":
    cli()
