"""
Tunable parameters for a simulation run.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .constants import DEFAULT_DT, G_DEFAULT, TRAJECTORY_STEPS, TRAJECTORY_STRIDE


class SimulationConfig(BaseModel):
    gravitational_constant: float = Field(G_DEFAULT, gt=0, allow_inf_nan=False)
    dt: float = Field(DEFAULT_DT, gt=0, allow_inf_nan=False)
    trajectory_steps: int = Field(TRAJECTORY_STEPS, ge=0)
    trajectory_stride: int = Field(TRAJECTORY_STRIDE, ge=1)
