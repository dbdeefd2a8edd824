import logging

import click

from cinema.infrastructure.cli.ticket_commands import (
    ticket_prices,
    ticket_purchase,
    ticket_quote,
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log gateway calls.")
def cli(verbose: bool) -> None:
    """Cinema ticket purchase service"""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
    )


# Register subcommands
cli.add_command(ticket_prices)
cli.add_command(ticket_purchase)
cli.add_command(ticket_quote)
