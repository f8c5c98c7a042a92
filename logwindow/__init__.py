"""Access-log analysis: 5XX error reports, failing-request ranking and busiest-window detection."""

__version__ = "0.1.0"

__all__ = ["__version__"]