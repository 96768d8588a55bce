"""Linear-hour remapping for the night observation window.

Shooting stars can only appear between 19:00 and 03:59, so the window spans
midnight. Ranges inside it are compared and walked in "linear" order, where
19:00 is position 0 and the remaining hours follow in clock order.
"""

from __future__ import annotations

# Hour of day at linear position i.
LINEAR_TO_HOUR: tuple[int, ...] = (
    19, 20, 21, 22, 23, 0, 1, 2, 3, 4, 5, 6,
    7, 8, 9, 10, 11, 12, 13, 14, 15, 16, 17, 18,
)  # fmt: skip

HOUR_TO_LINEAR: dict[int, int] = {hour: lh for lh, hour in enumerate(LINEAR_TO_HOUR)}

# Linear positions 0..8 (19:00 through 03:59) can hold shooting stars.
STAR_WINDOW_HOURS = 9


def to_linear_hour(hour: int) -> int:
    """Map an hour of day (0-23) to its linear position."""
    return HOUR_TO_LINEAR[hour]


def from_linear_hour(linear_hour: int) -> int:
    """Map a linear position (0-23) back to an hour of day."""
    return LINEAR_TO_HOUR[linear_hour]


def star_window_hours() -> list[int]:
    """Hours of day inside the shooting-star window, in linear order."""
    return [from_linear_hour(lh) for lh in range(STAR_WINDOW_HOURS)]
