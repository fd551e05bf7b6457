"""Core geometric engine for bezierpath.

This module contains the algorithms for:

- Cubic Bezier evaluation, derivatives, curvature and arc length
- Affine transform algebra
- Path derivation (anchors, curves, lengths) and global parameterization
- Shape constructors

All functions are pure; the only state is the per-Path memo cache.

Key classes:
- Curve: A cubic Bezier segment
- Matrix: A 2x3 affine transform
- Path: An immutable path with lazily derived geometry
- BezierPath: One derived subpath

Key functions:
- make_curve: Build the curve between two anchors
- translate, scale, rotate, merge_transforms: Build and compose matrices
- rectangle, rounded_rectangle, ellipse, circle: Shape constructors
"""

from bezierpath.core.curve import Curve, CurveDerivatives, evaluate, make_curve
from bezierpath.core.path import (
    BezierPath,
    CurveLocation,
    Path,
    SubpathLocation,
    derive_subpaths,
)
from bezierpath.core.shapes import KAPPA, circle, ellipse, rectangle, rounded_rectangle
from bezierpath.core.transform import (
    Matrix,
    apply_to_coordinates,
    apply_to_point,
    merge_transforms,
    rotate,
    scale,
    translate,
)

__all__ = [
    "KAPPA",
    # Path classes
    "BezierPath",
    # Curve classes
    "Curve",
    "CurveDerivatives",
    "CurveLocation",
    # Transform classes
    "Matrix",
    "Path",
    "SubpathLocation",
    # Functions
    "apply_to_coordinates",
    "apply_to_point",
    "circle",
    "derive_subpaths",
    "ellipse",
    "evaluate",
    "make_curve",
    "merge_transforms",
    "rectangle",
    "rotate",
    "rounded_rectangle",
    "scale",
    "translate",
]
