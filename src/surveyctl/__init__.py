"""surveyctl — synthetic survey sampling and income analysis CLI."""

__version__ = "0.1.0"
