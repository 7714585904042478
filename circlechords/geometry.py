"""Point placement on a circle and the chord region estimate.

Everything here is pure: the renderer and the animation loop call these helpers
once per frame and discard the result.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List, Optional

__all__ = [
    "Point",
    "to_rad",
    "point_on_circle",
    "generate_points",
    "estimate_regions",
    "rounded_regions",
]


@dataclass(frozen=True)
class Point:
    """A coordinate in surface-pixel space."""

    x: float
    y: float


def to_rad(deg: float) -> float:
    return deg * math.pi / 180.0


def point_on_circle(angle_degrees: float, radius: float) -> Point:
    """Return the point at ``angle_degrees`` on a circle centred at ``(radius, radius)``.

    The circle is inscribed in the square ``[0, 2 * radius]`` so the result can
    be drawn directly on a surface of side ``2 * radius``.
    """

    radians = to_rad(angle_degrees)
    return Point(
        x=radius + math.cos(radians) * radius,
        y=radius + math.sin(radians) * radius,
    )


def generate_points(
    radius: float,
    count: int,
    random_distribution: bool = False,
    rng: Optional[random.Random] = None,
) -> List[Point]:
    """Build ``count`` points on the circle.

    Parameters
    ----------
    radius:
        Circle radius; the centre sits at ``(radius, radius)``.
    count:
        Number of points. Zero yields an empty list.
    random_distribution:
        When False the points are spaced ``360 / count`` degrees apart, assigned
        in descending multiples of that step. When True every angle is an
        independent integer degree drawn from ``[0, 360]``.
    rng:
        Source of randomness, defaults to the :mod:`random` module.
    """

    if count < 0:
        raise ValueError(f"point count must be >= 0, got {count}")
    source = rng if rng is not None else random
    points: List[Point] = []
    remaining = count
    while remaining > 0:
        if random_distribution:
            angle = float(source.randint(0, 360))
        else:
            angle = remaining * (360.0 / count)
        points.append(point_on_circle(angle, radius))
        remaining -= 1
    return points


def estimate_regions(n: int) -> float:
    """Maximum number of disk regions cut by all chords between ``n`` points.

    Assumes general position (no three chords meet inside the disk). Evenly
    spaced points with concurrent chords produce fewer regions; the idealized
    value is reported regardless.
    """

    return (n / 24.0) * (n ** 3 - 6 * n ** 2 + 23 * n - 18) + 1


def rounded_regions(n: int) -> int:
    """Region estimate rounded half-up for display."""

    return int(math.floor(estimate_regions(n) + 0.5))
