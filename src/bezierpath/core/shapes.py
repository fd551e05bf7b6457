"""Shape constructors built from the four primitive commands."""

from bezierpath.core.path import Path
from bezierpath.domain import close, curve_to, line_to, move_to

# Handle length, relative to the radius, of a cubic approximating a quarter circle.
KAPPA = 0.5522847498

CornerRadii = tuple[float, float, float, float]


def rectangle(x: float, y: float, width: float, height: float) -> Path:
    """Closed rectangle starting at its (x, y) corner.

    Examples:
        >>> rectangle(10, 10, 50, 30).bounding_box()
        BoundingBox(x=10, y=10, width=50, height=30)
    """
    return Path(
        [
            move_to(x, y),
            line_to(x + width, y),
            line_to(x + width, y + height),
            line_to(x, y + height),
            close(),
        ]
    )


def rounded_rectangle(
    x: float,
    y: float,
    width: float,
    height: float,
    radius: float | CornerRadii,
) -> Path:
    """Closed rectangle with circular corners.

    Args:
        x: Left edge
        y: Top edge
        width: Width
        height: Height
        radius: One radius for all corners, or per-corner radii in CSS
            border-radius order (top left, top right, bottom right, bottom left)

    Returns:
        Path
    """
    if isinstance(radius, (int, float)):
        tl = tr = br = bl = radius
    else:
        tl, tr, br, bl = radius

    k = 1 - KAPPA
    right = x + width
    bottom = y + height
    return Path(
        [
            move_to(x, y + tl),
            curve_to(x, y + tl * k, x + tl * k, y, x + tl, y),
            line_to(right - tr, y),
            curve_to(right - tr * k, y, right, y + tr * k, right, y + tr),
            line_to(right, bottom - br),
            curve_to(right, bottom - br * k, right - br * k, bottom, right - br, bottom),
            line_to(x + bl, bottom),
            curve_to(x + bl * k, bottom, x, bottom - bl * k, x, bottom - bl),
            close(),
        ]
    )


def ellipse(cx: float, cy: float, rx: float, ry: float) -> Path:
    """Closed ellipse made of four cubic quarter arcs, starting at (cx + rx, cy)."""
    return Path(
        [
            move_to(cx + rx, cy),
            curve_to(cx + rx, cy - ry * KAPPA, cx + rx * KAPPA, cy - ry, cx, cy - ry),
            curve_to(cx - rx * KAPPA, cy - ry, cx - rx, cy - ry * KAPPA, cx - rx, cy),
            curve_to(cx - rx, cy + ry * KAPPA, cx - rx * KAPPA, cy + ry, cx, cy + ry),
            curve_to(cx + rx * KAPPA, cy + ry, cx + rx, cy + ry * KAPPA, cx + rx, cy),
            close(),
        ]
    )


def circle(cx: float, cy: float, r: float) -> Path:
    """Closed circle with center (cx, cy) and radius r."""
    return ellipse(cx, cy, r, r)
