"""Generate per-language HTML pages from one Jinja2 template and JSON language files."""

__version__ = "0.1.0"
__all__ = ["__version__"]