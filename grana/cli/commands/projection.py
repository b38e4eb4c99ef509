"""Compound-interest projection command."""

from pathlib import Path
from typing import Optional

import click

from grana.calculators.projection_calculator import (
    build_compound_projection,
    normalize_projection_inputs,
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
from grana.models.projection import ProjectionInputs
from grana.validators.input_validators import validate_projection_inputs
from grana.writers.report_writer import projection_to_dataframe, write_csv


@click.command(name="projection")
@click.option("--initial", type=str, default="1000", show_default=True, help="Initial amount")
@click.option(
    "--monthly", type=str, default="200", show_default=True, help="Monthly contribution"
)
@click.option("--period", type=str, default="24", show_default=True, help="Horizon")
@click.option(
    "--period-type",
    type=click.Choice(["months", "years"]),
    default="months",
    show_default=True,
)
@click.option(
    "--rate", type=str, default="0.8", show_default=True, help="Return rate in percent"
)
@click.option(
    "--rate-type",
    type=click.Choice(["monthly", "annual"]),
    default="monthly",
    show_default=True,
)
@click.option("--summary-only", is_flag=True, help="Do not print the monthly table")
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the monthly trajectory to this CSV file",
)
@click.pass_context
def projection(
    ctx: click.Context,
    initial: str,
    monthly: str,
    period: str,
    period_type: str,
    rate: str,
    rate_type: str,
    summary_only: bool,
    output: Optional[Path],
):
    """Project monthly contributions growing at compound interest.

    Each month the contribution is added first and the rate is applied to
    the resulting balance.

    Example:
        grana projection --initial 1000 --monthly 200 --period 2 --period-type years --rate 10 --rate-type annual
    """
    with with_error_handling(debug_enabled(ctx)):
        settings = get_config()
        inputs = ProjectionInputs(
            initial_amount=initial,
            monthly_contribution=monthly,
            period_value=period,
            period_type=period_type,
            return_rate=rate,
            rate_type=rate_type,
        )
        params = normalize_projection_inputs(inputs)

        report = validate_projection_inputs(
            params.initial_amount,
            params.monthly_contribution,
            params.period_months,
            params.monthly_rate,
            max_months=settings.max_projection_months,
        )
        for issue in report.get_warnings():
            click.echo(format_warning(str(issue)))
        if not report.is_valid():
            raise DataValidationError(
                "; ".join(str(issue) for issue in report.get_errors()),
                recovery_hint="Use a rate above -100%",
            )

        click.echo(
            format_info(
                f"Projecting {params.period_months} month(s) at "
                f"{params.monthly_rate:.4%} per month"
            )
        )

        result = build_compound_projection(
            params.initial_amount,
            params.monthly_contribution,
            params.period_months,
            params.monthly_rate,
            max_months=settings.max_projection_months,
        )
        currency = settings.currency

        if not summary_only:
            rows = [
                [
                    str(row.month),
                    format_currency(row.invested, currency=currency),
                    format_currency(row.balance, currency=currency),
                ]
                for row in result.rows
            ]
            click.echo()
            click.echo(format_table(["Month", "Invested", "Balance"], rows))

        interest_label = "Interest" if result.interest >= 0 else "Loss"
        click.echo()
        click.echo(f"Invested: {format_currency(result.invested_total, currency=currency)}")
        click.echo(
            f"{interest_label}: "
            f"{format_currency(result.interest, sign='negative', currency=currency)}"
        )
        click.echo(f"Total:    {format_currency(result.total, currency=currency)}")

        if output:
            try:
                write_csv(projection_to_dataframe(result), output)
            except OSError as e:
                raise ProcessingError(
                    f"Could not write trajectory to {output}: {e}",
                    recovery_hint="Check that the output path is writable",
                ) from e
            click.echo(format_success(f"Trajectory written to {output}"))
