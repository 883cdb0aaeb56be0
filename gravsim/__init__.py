from .body import Body
from .commands import BodySpec, ProjectionRequest
from .config import SimulationConfig
from .constants import FIXED_TAG, radius
from .errors import GravsimError, InvalidBodyError
from .system import System
from .trajectory import project

__all__ = [
    "Body",
    "BodySpec",
    "ProjectionRequest",
    "SimulationConfig",
    "FIXED_TAG",
    "radius",
    "GravsimError",
    "InvalidBodyError",
    "System",
    "project",
]
