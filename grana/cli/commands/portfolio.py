"""Portfolio rentability command."""

from pathlib import Path
from typing import Optional

import click

from grana.calculators.portfolio_calculator import (
    calculate_allocation,
    calculate_portfolio_totals,
    merge_positions,
)
from grana.cli.error_handlers import (
    ProcessingError,
    debug_enabled,
    with_error_handling,
)
from grana.cli.utils.formatters import (
    format_currency,
    format_info,
    format_percent,
    format_success,
    format_table,
    format_warning,
)
from grana.readers.record_reader import RecordReader
from grana.writers.report_writer import positions_to_dataframe, write_csv


@click.command(name="portfolio")
@click.argument("positions_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--rentability",
    "rentability_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Export of the rentability view with the latest quotes",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the position table to this CSV file",
)
@click.pass_context
def portfolio(
    ctx: click.Context,
    positions_file: Path,
    rentability_file: Optional[Path],
    output: Optional[Path],
):
    """Show portfolio positions, profit and rentability.

    Without quotes every asset is valued at its average price.

    Example:
        grana portfolio carteira.csv --rentability rentabilidade.csv
    """
    with with_error_handling(debug_enabled(ctx)):
        reader = RecordReader()
        positions = reader.read_positions(positions_file)
        skipped = len(reader.skipped_rows)

        rentability = []
        if rentability_file:
            rentability = reader.read_rentability(rentability_file)
            skipped += len(reader.skipped_rows)
        else:
            click.echo(format_info("No quotes given; valuing assets at average price"))

        if skipped:
            click.echo(format_warning(f"Skipped {skipped} invalid row(s)"))

        if not positions:
            click.echo(format_info("No positions found."))
            return

        summaries = merge_positions(positions, rentability)
        totals = calculate_portfolio_totals(summaries)

        headers = ["Asset", "Qty", "Avg price", "Price", "Invested", "Current", "Profit", "Rent.", "Day"]
        rows = [
            [
                s.symbol,
                f"{s.quantity:g}",
                format_currency(s.average_price, currency=s.currency),
                format_currency(s.current_price, currency=s.currency),
                format_currency(s.invested_total, currency=s.currency),
                format_currency(s.current_total, currency=s.currency),
                format_currency(s.profit, sign="plusOrMinus", currency=s.currency),
                format_percent(s.rent_percent),
                format_percent(s.daily_change),
            ]
            for s in summaries
        ]

        click.echo()
        click.echo(format_table(headers, rows))
        click.echo()
        click.echo(f"Invested: {format_currency(totals.total_invested)}")
        click.echo(f"Current:  {format_currency(totals.total_current)}")
        click.echo(f"Profit:   {format_currency(totals.profit, sign='plusOrMinus')}")
        click.echo(f"Rentability: {format_percent(totals.rentability_percent)}")
        click.echo(f"Daily change: {format_percent(totals.daily_change)}")

        allocation = calculate_allocation(summaries)
        click.echo()
        click.echo("Allocation by type:")
        for entry in allocation.itertuples(index=False):
            click.echo(
                f"  {entry.label}: {format_currency(entry.current_total)} "
                f"({format_percent(entry.share_percent)})"
            )

        if output:
            try:
                write_csv(positions_to_dataframe(summaries), output)
            except OSError as e:
                raise ProcessingError(
                    f"Could not write positions to {output}: {e}",
                    recovery_hint="Check that the output path is writable",
                ) from e
            click.echo(format_success(f"Positions written to {output}"))
