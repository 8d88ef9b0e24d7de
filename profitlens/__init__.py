"""ProfitLens: income and expense aggregation for freelancers."""

__version__ = "0.1.0"
