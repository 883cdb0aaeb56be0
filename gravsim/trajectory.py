"""
Look-ahead for a body that has not been placed yet.

The real bodies are treated as stationary attractors; they never feel the
projected body. The path stops at the first surface contact.
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence, Tuple

import numpy as np

from .body import Body, validate_body
from .constants import G_DEFAULT

logger = logging.getLogger(__name__)

Waypoint = Tuple[float, float]


def project(
    bodies: Sequence[Body],
    hypothetical: Body,
    dt: float,
    step_count: int,
    sample_stride: int,
    gravitational_constant: float = G_DEFAULT,
) -> List[Waypoint]:
    if step_count < 0:
        raise ValueError("step_count must be non-negative")
    if sample_stride < 1:
        raise ValueError("sample_stride must be at least 1")
    if not math.isfinite(dt) or dt <= 0:
        raise ValueError("dt must be positive")
    validate_body(hypothetical)

    body = hypothetical.copy()
    trajectory: List[Waypoint] = [(body.x, body.y)]

    for step in range(step_count):
        if any(body.overlaps(other) for other in bodies):
            logger.debug("Projection hit a body after %d steps", step)
            break
        net_force = np.zeros(2)
        for other in bodies:
            net_force += body.force_from(other, gravitational_constant)
        acceleration = np.zeros(2) if body.fixed else net_force / body.mass
        body.integrate(acceleration, dt)
        if step % sample_stride == 0:
            trajectory.append((body.x, body.y))

    return trajectory
