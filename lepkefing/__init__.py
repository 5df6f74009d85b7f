"""Liquid-style templating, markdown conversion and page JSON output for static sites."""

__version__ = "0.1.0"