"""
Helpers shared by the resource command groups.
"""

import logging

import click
import requests

from ..client import build_client
from ..config import DEFAULT_BASE_URL
from ..errors import AemError, NotConfigured
from ..output import print_error

logger = logging.getLogger(__name__)


def print_setup_hint():
    click.echo("\nRun the following to configure:", err=True)
    click.echo(
        click.style("  adobe config set --username admin --password admin", fg="cyan"),
        err=True,
    )
    click.echo(
        click.style(f"  adobe config set --base-url {DEFAULT_BASE_URL}", fg="cyan"),
        err=True,
    )


def call_api(store, operation, *args, **kwargs):
    """Run a resource operation with a fresh client.

    Failures are reported on stderr and end the command with exit code 1.
    """
    ctx = click.get_current_context()
    try:
        client = build_client(store)
        try:
            return operation(client, *args, **kwargs)
        finally:
            client.close()
    except NotConfigured as e:
        print_error(str(e))
        print_setup_hint()
        ctx.exit(1)
    except (AemError, requests.RequestException) as e:
        logger.debug(f"{operation.__name__} failed", exc_info=True)
        print_error(str(e))
        ctx.exit(1)


def json_option(f):
    return click.option("--json", "as_json", is_flag=True, help="Output as JSON")(f)
