"""Grana CLI.

Command-line access to the calculators: overtime pay for a shift or an
exported list of shifts, compound-interest projections and portfolio
rentability.
"""

import click

from grana import __version__
from grana.cli.commands.overtime import calculate_overtime, overtime_report
from grana.cli.commands.portfolio import portfolio
from grana.cli.commands.projection import projection
from grana.cli.error_handlers import with_error_handling
from grana.config.logging_config import LoggingConfig, configure_logging
from grana.config.settings import get_config


@click.group(
    help="Grana CLI - Overtime pay, investment projections and portfolio reports"
)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Verbose logging and full stack traces")
@click.pass_context
def cli(ctx: click.Context, debug: bool):
    """Grana CLI main entry point."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug

    with with_error_handling(debug):
        settings = get_config()
        logging_config = LoggingConfig.from_settings(settings)
        if debug:
            logging_config.log_level = "DEBUG"
        configure_logging(logging_config)


# Register commands
cli.add_command(calculate_overtime)
cli.add_command(overtime_report)
cli.add_command(projection)
cli.add_command(portfolio)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
