"""
Request models for the narrow command interface a UI uses to drive a System.

Only validated data crosses into the engine: a BodySpec with a non-positive
mass or a NaN coordinate never becomes a Body.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError

from .body import Body
from .errors import InvalidBodyError


class BodySpec(BaseModel):
    x: float = Field(allow_inf_nan=False)
    y: float = Field(allow_inf_nan=False)
    mass: float = Field(gt=0, allow_inf_nan=False)
    prev_x: Optional[float] = Field(None, allow_inf_nan=False)
    prev_y: Optional[float] = Field(None, allow_inf_nan=False)
    fixed: bool = False
    display_tag: int = 0

    def to_body(self) -> Body:
        prev_x = self.x if self.prev_x is None else self.prev_x
        prev_y = self.y if self.prev_y is None else self.prev_y
        return Body(
            self.mass,
            (self.x, self.y),
            previous=(prev_x, prev_y),
            fixed=self.fixed,
            display_tag=self.display_tag,
        )


class ProjectionRequest(BaseModel):
    body: BodySpec
    dt: Optional[float] = Field(None, gt=0, allow_inf_nan=False)
    step_count: Optional[int] = Field(None, ge=0)
    sample_stride: Optional[int] = Field(None, ge=1)


def parse_body(payload: Dict[str, Any]) -> Body:
    """Validate a plain mapping and build the Body it describes."""
    try:
        spec = BodySpec.model_validate(payload)
    except ValidationError as exc:
        raise InvalidBodyError(f"invalid body: {exc.errors()}") from exc
    return spec.to_body()
