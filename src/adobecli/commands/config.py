"""
Configuration subcommands: set, get and list the stored connection settings.

The password is stored as given but never echoed back.
"""

import click

from ..config import DEFAULT_BASE_URL
from ..output import PASSWORD_MASK, print_error, print_success


@click.group()
def config():
    """Manage CLI configuration."""


@config.command("set")
@click.option("--username", help="AEM username")
@click.option("--password", help="AEM password")
@click.option("--base-url", help=f"AEM base URL (default: {DEFAULT_BASE_URL})")
@click.pass_obj
def set_(store, username, password, base_url):
    """Set configuration values."""
    if not username and not password and not base_url:
        raise click.UsageError(
            "No options provided. Use --username, --password, or --base-url"
        )

    if username:
        store.set("username", username)
        print_success("Username set")
    if password:
        store.set("password", password)
        print_success("Password set")
    if base_url:
        store.set("base_url", base_url)
        print_success(f"Base URL set to: {base_url}")


@config.command()
@click.argument("key")
@click.pass_context
def get(ctx, key):
    """Get a configuration value.

    KEY is one of username, password or base-url. The password is never
    printed.
    """
    try:
        value = ctx.obj.get(key)
    except KeyError:
        value = None

    if value is None:
        print_error(f'Key "{key}" not found')
        ctx.exit(1)

    click.echo(PASSWORD_MASK if key == "password" else value)


@config.command("list")
@click.pass_obj
def list_(store):
    """List all configuration values."""
    values = store.list_all()

    def show(label, text, color):
        click.echo(f"{label} " + click.style(text, fg=color))

    click.echo(click.style("\nAdobe AEM CLI Configuration\n", bold=True))
    if values["username"]:
        show("Username:", values["username"], "green")
    else:
        show("Username:", "not set", "red")
    if values["password"]:
        show("Password:", PASSWORD_MASK, "green")
    else:
        show("Password:", "not set", "red")
    if values["base_url"]:
        show("Base URL:", values["base_url"], "green")
    else:
        show("Base URL:", f"using default: {DEFAULT_BASE_URL}", "yellow")
    click.echo("")
