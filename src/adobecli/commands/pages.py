"""
Page subcommands: list, get and create cq:Page nodes.
"""

import click

from .. import api
from ..output import print_details, print_json, print_success, print_table
from ._common import call_api, json_option


@click.group()
def pages():
    """Manage AEM pages."""


@pages.command("list")
@click.option("--path", default=api.DEFAULT_CONTENT_PATH, show_default=True, help="Content path to list")
@click.option(
    "--limit",
    type=click.IntRange(min=0),
    default=api.DEFAULT_LIMIT,
    show_default=True,
    help="Maximum number of results",
)
@json_option
@click.pass_obj
def list_(store, path, limit, as_json):
    """List pages under a path."""
    rows = call_api(store, api.list_pages, path, limit=limit)
    if as_json:
        print_json(rows)
        return

    print_table(
        rows,
        [
            ("name", "Name"),
            ("title", "Title"),
            ("template", "Template"),
            ("path", "Path"),
        ],
    )


@pages.command()
@click.argument("page_path")
@json_option
@click.pass_obj
def get(store, page_path, as_json):
    """Get details of a specific page."""
    page = call_api(store, api.get_page, page_path)
    if as_json:
        print_json(page)
        return

    content = page.get("jcr:content") or {}
    print_details(
        "Page Details",
        [
            ("Path", click.style(page_path, fg="cyan")),
            ("Title", content.get("jcr:title") or "N/A"),
            ("Template", content.get("cq:template") or "N/A"),
            ("Modified", content.get("cq:lastModified") or "N/A"),
            ("Type", page.get("jcr:primaryType") or "N/A"),
        ],
    )


@pages.command()
@click.option("--parent", required=True, help="Parent page path (e.g. /content/my-site)")
@click.option("--name", required=True, help="Page node name (URL-friendly)")
@click.option("--title", required=True, help="Page title")
@click.option("--template", default=api.DEFAULT_TEMPLATE, show_default=True, help="Page template path")
@json_option
@click.pass_obj
def create(store, parent, name, title, template, as_json):
    """Create a new AEM page."""
    page = call_api(store, api.create_page, parent, name, title, template)
    if as_json:
        print_json(page)
        return

    print_success(f"Page created: {click.style(title, bold=True)}")
    click.echo(f"Path:      {page['path']}")
    click.echo(f"Template:  {page['template']}")
