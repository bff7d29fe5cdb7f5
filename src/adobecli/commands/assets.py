"""
DAM asset subcommands.

- list: list assets below a DAM folder
- get: show one asset
- upload: upload a local file, or a placeholder, into a DAM folder
"""

import mimetypes
import os
import time

import click

from .. import api
from ..output import print_details, print_json, print_success, print_table
from ._common import call_api, json_option


@click.group()
def assets():
    """Manage DAM assets."""


@assets.command("list")
@click.option("--path", default=api.DEFAULT_DAM_PATH, show_default=True, help="DAM path to list")
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
    """List assets in DAM."""
    rows = call_api(store, api.list_assets, path, limit=limit)
    if as_json:
        print_json(rows)
        return

    print_table(
        rows,
        [
            ("name", "Name"),
            ("title", "Title"),
            ("type", "Type"),
            ("mimeType", "MIME Type"),
            ("path", "Path"),
        ],
    )


@assets.command()
@click.argument("asset_path")
@json_option
@click.pass_obj
def get(store, asset_path, as_json):
    """Get details of a specific asset."""
    asset = call_api(store, api.get_asset, asset_path)
    if as_json:
        print_json(asset)
        return

    content = asset.get("jcr:content") or {}
    print_details(
        "Asset Details",
        [
            ("Path", click.style(asset_path, fg="cyan")),
            ("Title", content.get("jcr:title") or "N/A"),
            ("MIME Type", content.get("jcr:mimeType") or "N/A"),
            ("Type", asset.get("jcr:primaryType") or "N/A"),
            ("Modified", content.get("jcr:lastModified") or "N/A"),
        ],
    )


@assets.command()
@click.option(
    "--dam-path",
    required=True,
    help="Target DAM folder path (e.g. /content/dam/my-folder)",
)
@click.option("--file-name", help="File name for the asset (default: name of --file)")
@click.option(
    "--file",
    "source",
    type=click.Path(exists=True, dir_okay=False),
    help="Local file to upload; a placeholder is sent when omitted",
)
@click.option("--mime-type", help="MIME type of the file (default: guessed or application/octet-stream)")
@json_option
@click.pass_obj
def upload(store, dam_path, file_name, source, mime_type, as_json):
    """Upload an asset to DAM."""
    if source:
        file_name = file_name or os.path.basename(source)
        with open(source, "rb") as f:
            content = f.read()
    elif file_name:
        content = f"placeholder-content-{int(time.time() * 1000)}"
    else:
        raise click.UsageError("Missing option '--file-name' (or '--file').")

    if not mime_type:
        mime_type = mimetypes.guess_type(file_name)[0] if source else None

    result = call_api(
        store,
        api.upload_asset,
        dam_path,
        file_name,
        content,
        mime_type or api.DEFAULT_MIME_TYPE,
    )
    if as_json:
        print_json(result)
        return

    print_success(f"Asset uploaded: {click.style(file_name, bold=True)} to {dam_path}")
