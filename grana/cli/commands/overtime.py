"""Overtime commands: single shift calculation and report over an export."""

from pathlib import Path
from typing import Optional

import click

from grana.aggregators.overtime_aggregator import (
    group_by_payment_month,
    summarize_overtime_records,
)
from grana.calculators.overtime_calculator import (
    NIGHT_BONUS_MULTIPLIER,
    calculate_overtime_batch,
    calculate_overtime_pay,
)
from grana.calculators.time_utils import (
    ensure_end_date,
    format_minutes_as_hours_and_minutes,
)
from grana.cli.error_handlers import (
    DataValidationError,
    ProcessingError,
    debug_enabled,
    with_error_handling,
)
from grana.cli.utils.formatters import (
    format_currency,
    format_info,
    format_success,
    format_table,
    format_warning,
)
from grana.config.settings import get_config
from grana.readers.record_reader import RecordReader
from grana.utils.parsing import parse_decimal_input
from grana.validators.input_validators import validate_overtime_inputs
from grana.writers.report_writer import overtime_to_dataframe, write_csv

DATETIME_FORMATS = [
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
]


@click.command(name="overtime")
@click.option(
    "--start",
    type=click.DateTime(formats=DATETIME_FORMATS),
    required=True,
    help="Shift start (YYYY-MM-DD HH:MM)",
)
@click.option(
    "--end",
    type=click.DateTime(formats=DATETIME_FORMATS),
    required=True,
    help="Shift end; an end before the start is read as the next day",
)
@click.option("--rate", type=str, required=True, help="Hourly rate, e.g. 25,50")
@click.option(
    "--percentage",
    type=str,
    default="0.75",
    show_default=True,
    help="Overtime fraction paid on every hour (0.75 = +75%)",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Reject missing, negative or non-finite values instead of calculating",
)
@click.pass_context
def calculate_overtime(
    ctx: click.Context, start, end, rate: str, percentage: str, strict: bool
):
    """Calculate the pay for a single overtime shift.

    Hours between 22:00 and 06:00 earn a 30% night premium on top of the
    overtime rate.

    Example:
        grana overtime --start "2024-03-01 22:00" --end "2024-03-01 06:00" --rate 20 --percentage 0.5
    """
    with with_error_handling(debug_enabled(ctx)):
        hourly_rate = parse_decimal_input(rate)
        overtime_percentage = parse_decimal_input(percentage)

        if strict:
            report = validate_overtime_inputs(
                start, end, hourly_rate, overtime_percentage
            )
            for issue in report.get_warnings():
                click.echo(format_warning(str(issue)))
            if not report.is_valid():
                raise DataValidationError(
                    "; ".join(str(issue) for issue in report.get_errors()),
                    recovery_hint="Fix the values above or run without --strict",
                )

        result = calculate_overtime_pay(start, end, hourly_rate, overtime_percentage)
        if hourly_rate is None or overtime_percentage is None:
            click.echo(
                format_warning("Hourly rate or percentage missing; showing zeros")
            )

        currency = get_config().currency
        shift_start, shift_end = ensure_end_date(start, end)
        night_label = f"Night extra ({NIGHT_BONUS_MULTIPLIER:.0%})"

        rows = [
            ["Shift", f"{shift_start:%Y-%m-%d %H:%M} -> {shift_end:%Y-%m-%d %H:%M}"],
            ["Duration", format_minutes_as_hours_and_minutes(result.total_minutes)],
            ["Night time", format_minutes_as_hours_and_minutes(result.night_minutes)],
            ["Base value", format_currency(result.base_value, currency=currency)],
            [night_label, format_currency(result.night_extra, currency=currency)],
            ["Total", format_currency(result.total_value, currency=currency)],
        ]

        click.echo(format_table(["Item", "Value"], rows))


@click.command(name="overtime-report")
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the recalculated report to this CSV file",
)
@click.option("--by-month", is_flag=True, help="Also show totals per payment month")
@click.pass_context
def overtime_report(
    ctx: click.Context, file: Path, output: Optional[Path], by_month: bool
):
    """Summarize an export of registered overtime shifts.

    Example:
        grana overtime-report overtime_hours.csv --by-month --output report.csv
    """
    with with_error_handling(debug_enabled(ctx)):
        click.echo(format_info(f"Reading overtime records from {file}..."))

        reader = RecordReader()
        records = reader.read_overtime(file)

        if reader.skipped_rows:
            click.echo(
                format_warning(f"Skipped {len(reader.skipped_rows)} invalid row(s)")
            )

        if not records:
            click.echo(format_info("No overtime records found."))
            return

        currency = get_config().currency
        summary = summarize_overtime_records(records)
        results = calculate_overtime_batch(summary.records)

        headers = ["Start", "End", "Duration", "Night", "Rate", "%", "Paid", "Recalc."]
        rows = [
            [
                f"{record.start_time:%Y-%m-%d %H:%M}",
                f"{record.end_time:%Y-%m-%d %H:%M}",
                format_minutes_as_hours_and_minutes(result.total_minutes),
                format_minutes_as_hours_and_minutes(result.night_minutes),
                format_currency(record.hourly_rate, currency=currency),
                f"{round(record.overtime_percentage * 100)}%",
                format_currency(record.total_value, currency=currency),
                format_currency(result.total_value, currency=currency),
            ]
            for record, result in zip(summary.records, results)
        ]

        click.echo()
        click.echo(format_table(headers, rows))
        click.echo()
        click.echo(
            f"Total time: {format_minutes_as_hours_and_minutes(summary.total_minutes)}"
        )
        click.echo(
            f"Total paid: {format_currency(summary.total_value, currency=currency)}"
        )

        if by_month:
            monthly = group_by_payment_month(summary.records)
            month_rows = [
                [
                    row.month,
                    str(row.records),
                    format_minutes_as_hours_and_minutes(row.total_minutes),
                    format_currency(row.total_value, currency=currency),
                ]
                for row in monthly.itertuples(index=False)
            ]
            click.echo()
            click.echo(format_table(["Month", "Records", "Time", "Paid"], month_rows))

        if output:
            try:
                write_csv(overtime_to_dataframe(summary.records, results), output)
            except OSError as e:
                raise ProcessingError(
                    f"Could not write report to {output}: {e}",
                    recovery_hint="Check that the output path is writable",
                ) from e
            click.echo(format_success(f"Report written to {output}"))

        click.echo()
        click.echo(format_success(f"Processed {summary.record_count} record(s)"))
