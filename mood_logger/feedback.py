"""
One-line result messages printed after a mood is logged.
"""

MIDPOINT = 5.0

CHEER_UP = "cheer up, better days are coming"
CHILL_OUT = "chill out and enjoy it"
STEADY = "right in the middle, steady as she goes"


def commentary(value: float) -> str:
    """Pick a comment by comparing the rating against the midpoint."""
    if value < MIDPOINT:
        return CHEER_UP
    if value > MIDPOINT:
        return CHILL_OUT
    return STEADY


def inserted_message(count: int, value: float) -> str:
    return f"{count} row inserted. {commentary(value)}"


def failed_message(error: BaseException) -> str:
    return f"update failed: {error}"
