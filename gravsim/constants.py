import math

# Tuned gravitational constant; far above the SI value so bodies react at
# screen scale within a few ticks.
G_DEFAULT = 20.0

# radius(mass) = sqrt(mass) + RADIUS_OFFSET
RADIUS_OFFSET = 2.0

# Display tag reserved for fixed ("star") bodies; the renderer owns the palette.
FIXED_TAG = 6

DEFAULT_DT = 0.1

# Look-ahead defaults: 5 * 1000 sub-steps, one waypoint every 5th.
TRAJECTORY_STEPS = 5000
TRAJECTORY_STRIDE = 5

# Drag distance is divided by this to get the launch offset.
LAUNCH_SCALE = 20.0


def radius(mass: float) -> float:
    """Effective physical radius of a body; used for collisions and hit tests."""
    return math.sqrt(mass) + RADIUS_OFFSET
