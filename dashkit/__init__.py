"""Builders for dashboard panels and template variables."""

__version__ = "0.1.0"