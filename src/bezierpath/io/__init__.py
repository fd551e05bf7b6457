"""Path data I/O for bezierpath.

This module converts between SVG path data strings and command streams.
It provides a clean abstraction layer between svgelements and the domain
models.

Key functions:
- parse_svg_path: Parse path data into primitive commands
- to_svg: Render commands as path data
"""

from bezierpath.io.svg import format_number, parse_svg_path, to_svg

__all__ = [
    "format_number",
    "parse_svg_path",
    "to_svg",
]
