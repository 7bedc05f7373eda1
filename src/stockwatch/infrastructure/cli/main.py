import click

from stockwatch.infrastructure.cli.stock_commands import stock_demo, stock_run
from stockwatch.infrastructure.logging import DEFAULT_LEVEL, LEVELS, configure_logging


@click.group()
@click.option(
    "--log-level",
    envvar="STOCKWATCH_LOG_LEVEL",
    default=DEFAULT_LEVEL,
    show_default=True,
    type=click.Choice(LEVELS, case_sensitive=False),
    help="Minimum level of log events written to stderr.",
)
def cli(log_level: str) -> None:
    """stockwatch — warehouse stock levels with low-stock alerts"""
    configure_logging(log_level)


# Register subcommands
cli.add_command(stock_demo)
cli.add_command(stock_run)
