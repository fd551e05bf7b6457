"""bezierpath - Geometry of 2D paths built from cubic Bezier segments.

bezierpath parses path descriptions (command sequences or SVG path data),
derives anchors, curves and arc lengths on demand, and answers geometric
queries at a normalized position along the whole path.

Example:
    >>> from bezierpath import Path
    >>> square = Path("M 0 0 L 10 0 L 10 10 L 0 10 Z")
    >>> round(square.length(), 6)
    40.0
    >>> square.bounding_box()
    BoundingBox(x=0.0, y=0.0, width=10.0, height=10.0)
"""

from bezierpath.core import (
    Curve,
    Matrix,
    Path,
    circle,
    ellipse,
    make_curve,
    merge_transforms,
    rectangle,
    rotate,
    rounded_rectangle,
    scale,
    translate,
)
from bezierpath.domain import (
    Anchor,
    BoundingBox,
    Close,
    CurveTo,
    LineTo,
    MoveTo,
    Vector,
    close,
    curve_to,
    line_to,
    move_to,
)

__version__ = "0.1.0"
__author__ = "bezierpath developers"

__all__ = [
    "Anchor",
    "BoundingBox",
    "Close",
    "Curve",
    "CurveTo",
    "LineTo",
    "Matrix",
    "MoveTo",
    "Path",
    "Vector",
    "__author__",
    "__version__",
    "circle",
    "close",
    "curve_to",
    "ellipse",
    "line_to",
    "make_curve",
    "merge_transforms",
    "move_to",
    "rectangle",
    "rotate",
    "rounded_rectangle",
    "scale",
    "translate",
]
