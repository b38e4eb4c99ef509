"""GranaApp calculators: overtime pay, compound projections and portfolio totals."""

__version__ = "1.0.0"
