"""Command-line interface for bezierpath.

This module provides the Typer-based CLI for measuring, sampling and
transforming SVG path data.

Usage:
    bezierpath measure "M 0 0 L 10 0 L 10 10 L 0 10 Z"
    bezierpath sample "M 0 0 C 0 10 10 10 10 0" --samples 5
    bezierpath transform "M 0 0 L 10 0 L 10 10 Z" --rotate 90 --dx 5
"""

from bezierpath.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
