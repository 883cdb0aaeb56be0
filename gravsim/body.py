"""
Mutable representation of a body owned by a System.

Velocity is never stored: the Verlet step keeps the position one tick in the
past (``previous``) and the velocity is implicit in the difference.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

import numpy as np

from .constants import G_DEFAULT, radius
from .errors import InvalidBodyError


class Body:
    """
    A single point mass. ``display_tag`` is opaque to the physics and only
    carried along for the renderer.
    """

    def __init__(
        self,
        mass: float,
        position: Iterable[float],
        previous: Optional[Iterable[float]] = None,
        fixed: bool = False,
        display_tag: int = 0,
    ) -> None:
        self.mass = float(mass)
        if not math.isfinite(self.mass) or self.mass <= 0:
            raise InvalidBodyError(f"mass must be positive and finite, got {mass!r}")
        self.position = np.array(position, dtype=float)
        if previous is None:
            self.previous = self.position.copy()
        else:
            self.previous = np.array(previous, dtype=float)
        if self.position.shape != (2,) or self.previous.shape != (2,):
            raise InvalidBodyError("position and previous must be 2-element vectors")
        if not (np.all(np.isfinite(self.position)) and np.all(np.isfinite(self.previous))):
            raise InvalidBodyError("coordinates must be finite")
        self.display_tag = int(display_tag)
        self.fixed = bool(fixed)
        if self.fixed:
            self.previous = self.position.copy()

    @classmethod
    def at_rest(cls, x: float, y: float, mass: float, fixed: bool = False, display_tag: int = 0) -> Body:
        return cls(mass, (x, y), fixed=fixed, display_tag=display_tag)

    @classmethod
    def launched(
        cls,
        x: float,
        y: float,
        mass: float,
        vx: float,
        vy: float,
        fixed: bool = False,
        display_tag: int = 0,
    ) -> Body:
        """Start at (x, y) already moving by (vx, vy) per tick."""
        return cls(mass, (x + vx, y + vy), previous=(x, y), fixed=fixed, display_tag=display_tag)

    @property
    def x(self) -> float:
        return float(self.position[0])

    @property
    def y(self) -> float:
        return float(self.position[1])

    @property
    def prev_x(self) -> float:
        return float(self.previous[0])

    @property
    def prev_y(self) -> float:
        return float(self.previous[1])

    @property
    def radius(self) -> float:
        return radius(self.mass)

    def velocity(self, dt: float) -> np.ndarray:
        return (self.position - self.previous) / dt

    def distance_to(self, other: Body) -> float:
        """Return Euclidean distance to another body."""
        return float(np.linalg.norm(self.position - other.position))

    def overlaps(self, other: Body) -> bool:
        return self.distance_to(other) <= self.radius + other.radius

    def contains_point(self, x: float, y: float) -> bool:
        return math.hypot(self.x - x, self.y - y) <= self.radius

    def force_from(self, other: Body, gravitational_constant: float = G_DEFAULT) -> np.ndarray:
        """
        Gravitational pull exerted on this body by ``other``, pointing from
        self toward other. Coincident bodies have no defined direction.
        """
        offset = other.position - self.position
        distance = float(np.linalg.norm(offset))
        if distance == 0:
            raise ZeroDivisionError("Cannot compute force between coincident bodies.")
        magnitude = gravitational_constant * self.mass * other.mass / distance**2
        return magnitude * (offset / distance)

    def integrate(self, acceleration: np.ndarray, dt: float) -> None:
        """Stormer-Verlet step: the new position is built from the old previous."""
        new_position = 2.0 * self.position - self.previous + np.asarray(acceleration, dtype=float) * dt * dt
        self.previous = self.position
        self.position = new_position

    def copy(self) -> Body:
        clone = Body.__new__(Body)
        clone.mass = self.mass
        clone.position = self.position.copy()
        clone.previous = self.previous.copy()
        clone.fixed = self.fixed
        clone.display_tag = self.display_tag
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Body):
            return NotImplemented
        return (
            self.mass == other.mass
            and np.array_equal(self.position, other.position)
            and np.array_equal(self.previous, other.previous)
            and self.fixed == other.fixed
            and self.display_tag == other.display_tag
        )

    def __repr__(self) -> str:
        return (
            f"Body(mass={self.mass!r}, position=({self.x!r}, {self.y!r}), "
            f"previous=({self.prev_x!r}, {self.prev_y!r}), fixed={self.fixed!r}, "
            f"display_tag={self.display_tag!r})"
        )


def validate_body(body: Body) -> None:
    """Bodies are mutable; re-check state before it enters a computation."""
    if not math.isfinite(body.mass) or body.mass <= 0:
        raise InvalidBodyError(f"mass must be positive and finite, got {body.mass!r}")
    if not np.all(np.isfinite(body.position)) or not np.all(np.isfinite(body.previous)):
        raise InvalidBodyError("coordinates must be finite")
