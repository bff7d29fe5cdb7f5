"""
Tag subcommands: list, create and delete cq:Tag nodes.

Tag listings are never truncated.
"""

import click

from .. import api
from ..output import print_json, print_success, print_table
from ._common import call_api, json_option


@click.group()
def tags():
    """Manage AEM tags."""


@tags.command("list")
@click.option(
    "--namespace",
    default=api.DEFAULT_TAG_NAMESPACE,
    show_default=True,
    help="Tag namespace path",
)
@json_option
@click.pass_obj
def list_(store, namespace, as_json):
    """List tags in a namespace."""
    rows = call_api(store, api.list_tags, namespace)
    if as_json:
        print_json(rows)
        return

    print_table(
        rows,
        [
            ("name", "Name"),
            ("title", "Title"),
            ("count", "Usage Count"),
            ("path", "Path"),
        ],
    )


@tags.command()
@click.option(
    "--namespace",
    required=True,
    help="Tag namespace path (e.g. /content/cq:tags/my-namespace)",
)
@click.option("--name", required=True, help="Tag node name")
@click.option("--title", required=True, help="Tag display title")
@click.option("--description", help="Tag description")
@json_option
@click.pass_obj
def create(store, namespace, name, title, description, as_json):
    """Create a new tag."""
    tag = call_api(store, api.create_tag, namespace, name, title, description)
    if as_json:
        print_json(tag)
        return

    print_success(f"Tag created: {click.style(title, bold=True)}")
    click.echo(f"Path:  {tag['path']}")


@tags.command()
@click.argument("tag_path")
@click.pass_obj
def delete(store, tag_path):
    """Delete a tag by its full path."""
    call_api(store, api.delete_tag, tag_path)
    print_success("Tag deleted successfully")
