"""
Input error type and structured error keys.
Every structural failure raises InvalidInput; map keys to user-facing messages in the CLI.
"""

from __future__ import annotations

# Known error keys (carried on InvalidInput.error_key)
RECTANGLE_NULL = "rectangle_null"
RECTANGLE_EMPTY = "rectangle_empty"
VERTEX_NULL = "vertex_null"
POINT_NULL = "point_null"
POINT_ARITY = "point_arity"
COORDINATE_TYPE = "coordinate_type"
INPUT_UNREADABLE = "input_unreadable"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    RECTANGLE_NULL: "No rectangle given. Pass a list of [x, y] vertices.",
    RECTANGLE_EMPTY: "Rectangle has no vertices. Pass at least its four corners.",
    VERTEX_NULL: "A rectangle vertex is missing. Remove null entries from the vertex list.",
    POINT_NULL: "No point given. Pass the point as [x, y].",
    POINT_ARITY: "Coordinates must be pairs of the form [x, y].",
    COORDINATE_TYPE: "Coordinates must be integers.",
    INPUT_UNREADABLE: "Input could not be read. Check the file format.",
}


class InvalidInput(ValueError):
    """Raised when coordinate data is structurally malformed (null, wrong arity, non-integer)."""

    def __init__(self, message: str, error_key: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.error_key = error_key


def user_message(error_key: str | None, fallback: str = "Invalid input.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)
