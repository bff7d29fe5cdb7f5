"""
Rendering of command results: tables, JSON dumps and status lines.
"""

import json

import click

MAX_COLUMN_WIDTH = 50
PASSWORD_MASK = "****"


def print_success(message):
    click.echo(click.style("✓", fg="green") + " " + message)


def print_error(message):
    click.echo(click.style("✗", fg="red") + " " + message, err=True)


def print_json(data):
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _cell(row, key):
    value = row.get(key)
    return "" if value is None else str(value)


def print_table(rows, columns):
    """Print rows as a fixed-width table.

    Args:
        rows (list): Dicts to print, one per line
        columns (list): ``(key, label)`` pairs selecting and naming columns
    """
    if not rows:
        click.echo(click.style("No results found.", fg="yellow"))
        return

    widths = {}
    for key, label in columns:
        width = max([len(label)] + [len(_cell(row, key)) for row in rows])
        widths[key] = min(width, MAX_COLUMN_WIDTH)

    header = "  ".join(label.ljust(widths[key]) for key, label in columns)
    click.echo(click.style(header, fg="cyan", bold=True))
    click.echo(click.style("-" * len(header), dim=True))

    for row in rows:
        click.echo(
            "  ".join(
                _cell(row, key)[: widths[key]].ljust(widths[key]) for key, _ in columns
            )
        )

    click.echo(click.style(f"\n{len(rows)} result(s)", dim=True))


def print_details(heading, fields):
    """Print a labelled block of ``(label, value)`` pairs."""
    click.echo(click.style(f"\n{heading}\n", bold=True))
    width = max(len(label) for label, _ in fields) + 1
    for label, value in fields:
        click.echo(f"{(label + ':').ljust(width)} {value}")
    click.echo("")
