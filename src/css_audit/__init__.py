"""CSS Audit - health checks for stylesheets."""

__version__ = "1.0.0"
