"""Lucky - personalised, strictly positive daily fortune reports."""

__version__ = "0.3.0"
