"""Rigid box body."""

from __future__ import annotations

from dataclasses import dataclass, field

from cubicat.physics.math_utils import Vec2

FLT_MAX = 3.4028234663852886e38
DEFAULT_FRICTION = 0.2


@dataclass(eq=False)
class Body:
    """A box-shaped rigid body; a mass of FLT_MAX makes it static."""

    position: Vec2 = field(default_factory=Vec2)
    rotation: float = 0.0
    velocity: Vec2 = field(default_factory=Vec2)
    angular_velocity: float = 0.0
    force: Vec2 = field(default_factory=Vec2)
    torque: float = 0.0
    width: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))
    friction: float = DEFAULT_FRICTION
    mass: float = FLT_MAX
    inv_mass: float = 0.0
    inertia: float = FLT_MAX
    inv_inertia: float = 0.0
    group_id: int = 0

    def reset(self, width: Vec2, mass: float) -> None:
        """Clear the motion state and give the body a new size and mass."""
        self.position = Vec2()
        self.rotation = 0.0
        self.velocity = Vec2()
        self.angular_velocity = 0.0
        self.force = Vec2()
        self.torque = 0.0
        self.friction = DEFAULT_FRICTION
        self.mass = mass
        self.set_width(width)

    def set_width(self, width: Vec2) -> None:
        """Set the box size and recompute the mass properties."""
        self.width = width
        if self.mass < FLT_MAX:
            self.inv_mass = 1.0 / self.mass
            self.inertia = self.mass * (width.x * width.x + width.y * width.y) / 12.0
            self.inv_inertia = 1.0 / self.inertia
        else:
            self.inv_mass = 0.0
            self.inertia = FLT_MAX
            self.inv_inertia = 0.0

    def add_force(self, force: Vec2) -> None:
        self.force = self.force + force