"""Domain models for bezierpath.

This module contains the value types that the geometric engine is built on.
All models are:

- Immutable (frozen dataclasses)
- Serializable to plain dictionaries
- Free of behavior that depends on hidden state

Key classes:
- Vector: A 2D vector/point with its algebra
- Anchor: A path vertex with optional tangent handles
- MoveTo, LineTo, CurveTo, Close: Drawing commands
- BoundingBox: Axis-aligned bounds
"""

from bezierpath.domain.anchor import Anchor
from bezierpath.domain.bounds import BoundingBox
from bezierpath.domain.commands import (
    Close,
    CurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    close,
    command_from_dict,
    curve_to,
    line_to,
    move_to,
)
from bezierpath.domain.vector import Vector

__all__: list[str] = [
    # Core types
    "Vector",
    "Anchor",
    "BoundingBox",
    # Commands
    "PathCommand",
    "MoveTo",
    "LineTo",
    "CurveTo",
    "Close",
    "command_from_dict",
    "move_to",
    "line_to",
    "curve_to",
    "close",
]
