"""Exception hierarchy for bezierpath."""


class BezierPathError(Exception):
    """Base exception for all bezierpath errors."""

    pass


class PathParseError(BezierPathError):
    """Error parsing SVG path data."""

    def __init__(self, data: str, reason: str) -> None:
        self.data = data
        self.reason = reason
        super().__init__(f"Failed to parse path data '{data}': {reason}")


class GeometryError(BezierPathError):
    """Errors in geometric calculations."""

    pass


class EmptyPathError(GeometryError):
    """A location query was made on a path without any curves."""

    def __init__(self, message: str = "Path has no curves to query") -> None:
        super().__init__(message)


class ConfigurationError(BezierPathError):
    """Invalid option or setting."""

    def __init__(self, option: str, details: str) -> None:
        self.option = option
        self.details = details
        super().__init__(f"Invalid value for '{option}': {details}")
