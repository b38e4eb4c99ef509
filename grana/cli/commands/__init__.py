"""CLI commands."""

from grana.cli.commands.overtime import calculate_overtime, overtime_report
from grana.cli.commands.portfolio import portfolio
from grana.cli.commands.projection import projection

__all__ = ["calculate_overtime", "overtime_report", "portfolio", "projection"]
