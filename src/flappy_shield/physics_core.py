"""
physics_core.py: Stateless kinematic functions and collision logic.

Every function here works on plain records: a body only needs a ``velocity``
attribute and a rectangle only needs ``x``, ``y``, ``width`` and ``height``.
Position integration is left to the caller.
"""

import math

from .constants import MAX_FRAME_DT


def apply_gravity(body, gravity_accel: float, dt: float) -> None:
    """Accelerates the body downward for ``dt`` seconds. No clamping."""
    body.velocity += gravity_accel * dt


def apply_jump(body, jump_force: float) -> None:
    """Replaces the velocity with an upward impulse (negative y is up)."""
    body.velocity = -jump_force


def clamp_velocity(body, max_velocity: float) -> None:
    """Caps the fall speed. Upward velocity is left alone."""
    body.velocity = min(body.velocity, max_velocity)


def check_collision(a, b) -> bool:
    """Axis-aligned overlap test. Touching edges do not collide."""
    return (a.x < b.x + b.width and
            a.x + a.width > b.x and
            a.y < b.y + b.height and
            a.y + a.height > b.y)


def clamp_frame_delta(dt: float, max_step: float = MAX_FRAME_DT) -> float:
    """Maps any elapsed time onto [0, max_step]."""
    if math.isnan(dt) or dt <= 0:
        return 0.0
    return min(dt, max_step)
