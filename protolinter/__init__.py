"""Lint rules, configuration, file discovery and reporters for Protocol Buffer syntax trees."""

__version__ = "0.1.0"
__all__ = ["__version__"]