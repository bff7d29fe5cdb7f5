import logging

import click

from .commands import assets, config, pages, tags
from .config import ConfigStore, JsonFileBackend

VERSION = "1.0.0"

logging.basicConfig(level=logging.WARNING)


@click.group(invoke_without_command=True)
@click.version_option(VERSION, prog_name="adobe")
@click.option(
    "--config-file",
    type=click.Path(dir_okay=False),
    help="Configuration file to use instead of the one in the user's app directory",
)
@click.option("-v", "--verbose", is_flag=True, help="Log HTTP requests and responses")
@click.pass_context
def main(ctx, config_file, verbose):
    """Adobe AEM CLI - Experience Manager from your terminal."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if ctx.obj is None:
        ctx.obj = ConfigStore(JsonFileBackend(config_file))

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# register subcommands
main.add_command(config)
main.add_command(assets)
main.add_command(pages)
main.add_command(tags)

if __name__ == "__main__":
    main()
