"""Exception hierarchy for profile2d."""

from typing import NoReturn


class Profile2DError(Exception):
    """Base exception for all profile2d errors."""

    pass


class GeometryError(Profile2DError):
    """Errors in geometric calculations."""

    pass


class CurveError(GeometryError):
    """Error with curve data or operations."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class PointNotOnCurveError(CurveError):
    """A point could not be projected onto a curve within tolerance."""

    def __init__(self, point: object, distance: float) -> None:
        self.point = point
        self.distance = distance
        super().__init__(f"Point {point} is not on the curve (distance {distance:.3g})")


class BlueprintError(GeometryError):
    """Error with blueprint data or operations."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvariantViolationError(Profile2DError):
    """An internal invariant does not hold.

    Raised for states the algorithms consider impossible. These are bugs,
    never recoverable conditions, and are not caught inside the library.
    """

    def __init__(self, location: str, message: str) -> None:
        self.location = location
        self.message = message
        super().__init__(f"Invariant violated in {location}: {message}")


def bug(location: str, message: str) -> NoReturn:
    """Fail fast on an impossible internal state.

    Args:
        location: Name of the operation that detected the problem
        message: Description of the violated invariant

    Raises:
        InvariantViolationError: Always
    """
    raise InvariantViolationError(location, message)


class ProfileIOError(Profile2DError):
    """Errors related to profile document loading or saving."""

    pass


class ProfileLoadError(ProfileIOError):
    """Error loading a profile document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load profile '{path}': {reason}")


class ProfileSaveError(ProfileIOError):
    """Error saving a profile document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save profile '{path}': {reason}")


class ProfileFormatError(ProfileIOError):
    """Invalid profile document contents."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid profile document '{path}': {details}")
