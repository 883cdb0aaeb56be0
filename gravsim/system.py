"""
Main class for running a gravity sandbox.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from .body import Body, validate_body
from .collisions import resolve_merges
from .commands import BodySpec, ProjectionRequest, parse_body
from .config import SimulationConfig
from .constants import LAUNCH_SCALE
from .errors import InvalidBodyError
from .trajectory import Waypoint, project

logger = logging.getLogger(__name__)


class System:
    """
    Sole owner of the body collection. Callers change it only through
    insert/remove/tick; everything handed out is a copy.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        initial_bodies: Optional[Sequence[dict]] = None,
        **overrides: Any,
    ):
        config = config or SimulationConfig()
        if overrides:
            config = SimulationConfig.model_validate({**config.model_dump(), **overrides})
        self.config = config
        self._bodies: List[Body] = []
        if initial_bodies:
            self.add_bodies(initial_bodies)

    @property
    def gravitational_constant(self) -> float:
        return self.config.gravitational_constant

    def insert(self, body: Union[Body, BodySpec]) -> int:
        """Append a body and return its index."""
        if isinstance(body, BodySpec):
            body = body.to_body()
        elif not isinstance(body, Body):
            raise InvalidBodyError(f"expected Body or BodySpec, got {type(body).__name__}")
        validate_body(body)
        stored = body.copy()
        if stored.fixed:
            stored.previous = stored.position.copy()
        self._bodies.append(stored)
        logger.info("Inserted body %d (mass %.3f at %.3f, %.3f)", len(self._bodies) - 1, body.mass, body.x, body.y)
        return len(self._bodies) - 1

    def add_body(
        self,
        x: float,
        y: float,
        mass: float,
        prev_x: Optional[float] = None,
        prev_y: Optional[float] = None,
        fixed: bool = False,
        display_tag: int = 0,
    ) -> int:
        return self.insert(
            parse_body(
                {
                    "x": x,
                    "y": y,
                    "mass": mass,
                    "prev_x": prev_x,
                    "prev_y": prev_y,
                    "fixed": fixed,
                    "display_tag": display_tag,
                }
            )
        )

    def add_bodies(self, configs: Sequence[Dict[str, Any]]) -> List[int]:
        # Validate everything first so a bad entry leaves the system untouched.
        created = [parse_body(cfg) for cfg in configs]
        return [self.insert(body) for body in created]

    def launch(
        self,
        x: float,
        y: float,
        mass: float,
        drag_dx: float,
        drag_dy: float,
        fixed: bool = False,
        display_tag: int = 0,
    ) -> int:
        """
        Slingshot placement: dragging away from (x, y) by (drag_dx, drag_dy)
        sends the body off in the opposite direction.
        """
        return self.add_body(
            x,
            y,
            mass,
            prev_x=x + drag_dx / LAUNCH_SCALE,
            prev_y=y + drag_dy / LAUNCH_SCALE,
            fixed=fixed,
            display_tag=display_tag,
        )

    def remove(self, index: int) -> Body:
        if not 0 <= index < len(self._bodies):
            raise IndexError(f"body index {index} out of range for {len(self._bodies)} bodies")
        body = self._bodies.pop(index)
        logger.info("Removed body %d (mass %.3f)", index, body.mass)
        return body

    def body_at(self, x: float, y: float) -> Optional[int]:
        """Index of the first body whose surface contains the point."""
        return next((idx for idx, b in enumerate(self._bodies) if b.contains_point(x, y)), None)

    def clear(self) -> None:
        self._bodies = []

    def snapshot(self) -> List[Body]:
        return [body.copy() for body in self._bodies]

    def __len__(self) -> int:
        return len(self._bodies)

    def __iter__(self) -> Iterator[Body]:
        return iter(self.snapshot())

    def __getitem__(self, index: Union[int, slice]) -> Union[Body, List[Body]]:
        if isinstance(index, slice):
            return [body.copy() for body in self._bodies[index]]
        return self._bodies[index].copy()

    def total_mass(self) -> float:
        return sum(body.mass for body in self._bodies)

    def center_of_mass(self) -> Optional[Tuple[float, float]]:
        if not self._bodies:
            return None
        weighted = sum((body.mass * body.position for body in self._bodies), np.zeros(2))
        center = weighted / self.total_mass()
        return float(center[0]), float(center[1])

    def _compute_accelerations(self) -> Tuple[List[np.ndarray], List[Tuple[int, int]]]:
        """
        One pass over every ordered pair: accumulate forces and collect the
        pairs whose surfaces touch. Coincident pairs always touch, so they are
        only merged and never reach the force law.
        """
        bodies = self._bodies
        G = self.gravitational_constant
        accelerations: List[np.ndarray] = []
        merges: List[Tuple[int, int]] = []

        for i, body in enumerate(bodies):
            net_force = np.zeros(2)
            for j, other in enumerate(bodies):
                if i == j:
                    continue
                distance = body.distance_to(other)
                if distance <= body.radius + other.radius:
                    if i < j:
                        merges.append((i, j))
                    if distance == 0:
                        continue
                net_force += body.force_from(other, G)
            if body.fixed:
                accelerations.append(np.zeros(2))
            else:
                accelerations.append(net_force / body.mass)
        return accelerations, merges

    def tick(self, dt: Optional[float] = None) -> None:
        """
        Compute forces, advance every body by dt, then merge whatever collided.
        Work happens on copies; the collection is swapped in at the end.
        """
        dt = self.config.dt if dt is None else float(dt)
        if not math.isfinite(dt) or dt <= 0:
            raise ValueError("dt must be positive")
        if not self._bodies:
            return

        accelerations, merges = self._compute_accelerations()

        staged = self.snapshot()
        for body, acceleration in zip(staged, accelerations):
            body.integrate(acceleration, dt)

        self._bodies = resolve_merges(staged, merges)

    def project(
        self,
        hypothetical: Union[Body, BodySpec, ProjectionRequest],
        dt: Optional[float] = None,
        step_count: Optional[int] = None,
        sample_stride: Optional[int] = None,
    ) -> List[Waypoint]:
        """
        Predicted path of ``hypothetical`` among the current bodies. The
        system is left exactly as it was.
        """
        if isinstance(hypothetical, ProjectionRequest):
            request = hypothetical
            hypothetical = request.body
            dt = request.dt if dt is None else dt
            step_count = request.step_count if step_count is None else step_count
            sample_stride = request.sample_stride if sample_stride is None else sample_stride
        if isinstance(hypothetical, BodySpec):
            hypothetical = hypothetical.to_body()

        return project(
            self.snapshot(),
            hypothetical,
            dt=self.config.dt if dt is None else dt,
            step_count=self.config.trajectory_steps if step_count is None else step_count,
            sample_stride=self.config.trajectory_stride if sample_stride is None else sample_stride,
            gravitational_constant=self.gravitational_constant,
        )
