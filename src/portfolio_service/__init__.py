"""Portfolio Service: content API, public pages and admin dashboard."""

__version__ = "0.1.0"
