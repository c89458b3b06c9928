"""Steering rules for a flock of boids.

A rule turns a boid and its neighbourhood into a steering force. The boid is
expected to expose ``position`` and ``velocity`` as :class:`Vec2`. Rules that
need the surroundings read them from their ``world``: ``window_size`` (a
:class:`Vec2` or an ``(x, y)`` pair) and ``mouse_position`` (a :class:`Vec2`
while the mouse button is held, ``None`` otherwise).
"""

from __future__ import annotations

import copy
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterator, Sequence

Color = tuple[int, int, int, int]

YELLOW: Color = (255, 255, 0, 255)
CYAN: Color = (0, 255, 255, 255)
RED: Color = (255, 0, 0, 255)
LIGHT_RED: Color = (255, 128, 128, 255)
MAGENTA: Color = (255, 0, 255, 255)
WHITE: Color = (255, 255, 255, 255)


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vec2":
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def dot(self, other: "Vec2") -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Vec2":
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.magnitude()
        if length == 0:
            return Vec2()
        return Vec2(self.x / length, self.y / length)

    def squared_distance(self, other: "Vec2") -> float:
        """Squared distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def rotated(self, degrees: float) -> "Vec2":
        """This vector rotated by the given angle in degrees."""
        radians = math.radians(degrees)
        cos_a, sin_a = math.cos(radians), math.sin(radians)
        return Vec2(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)


class FlockingRule(ABC):
    """A weighted steering behaviour; the last computed force is cached."""

    name: str = ""
    explanation: str = ""
    base_weight_multiplier: float = 1.0

    def __init__(
        self, world: Any, debug_color: Color, weight: float, is_enabled: bool = True
    ) -> None:
        self.world = world
        self.debug_color = debug_color
        self.weight = weight
        self.is_enabled = is_enabled
        self.force = Vec2()

    @abstractmethod
    def compute_force(self, neighborhood: Sequence[Any], boid: Any) -> Vec2:
        """The raw, unweighted steering force for the boid."""

    def compute_weighted_force(self, neighborhood: Sequence[Any], boid: Any) -> Vec2:
        """Compute, weight and cache the force; a disabled rule gives zero."""
        if self.is_enabled:
            self.force = (
                self.base_weight_multiplier
                * self.weight
                * self.compute_force(neighborhood, boid)
            )
        else:
            self.force = Vec2()
        return self.force

    def clone(self) -> "FlockingRule":
        """An independent copy sharing the same world."""
        return copy.copy(self)


class AlignmentRule(FlockingRule):
    """Steer toward the average heading of local flockmates."""

    name = "Alignment Rule"
    explanation = "Steer to move in the same direction that nearby boids."
    base_weight_multiplier = 1.0

    def __init__(self, world: Any, weight: float = 1.0, is_enabled: bool = True) -> None:
        super().__init__(world, YELLOW, weight, is_enabled)

    def compute_force(self, neighborhood: Sequence[Any], boid: Any) -> Vec2:
        if not neighborhood:
            return Vec2()
        total = Vec2()
        for other in neighborhood:
            total = total + other.velocity
        return (total / len(neighborhood)).normalized()


class BoundedAreaRule(FlockingRule):
    """Push boids back from the window borders."""

    name = "Bounded Windows"
    explanation = "Steer to avoid the window's borders."
    base_weight_multiplier = 1.0

    def __init__(
        self,
        world: Any,
        desired_distance: int,
        weight: float = 1.0,
        is_enabled: bool = True,
    ) -> None:
        super().__init__(world, LIGHT_RED, weight, is_enabled)
        self.desired_distance = desired_distance

    def compute_force(self, neighborhood: Sequence[Any], boid: Any) -> Vec2:
        distance = float(self.desired_distance)
        if distance <= 0:
            return Vec2()
        width, height = self.world.window_size
        x, y = boid.position
        fx = fy = 0.0
        if x < distance:
            fx += (distance - x) / distance
        elif x > width - distance:
            fx -= (x - (width - distance)) / distance
        if y < distance:
            fy += (distance - y) / distance
        elif y > height - distance:
            fy -= (y - (height - distance)) / distance
        return Vec2(fx, fy)


class CohesionRule(FlockingRule):
    """Steer toward the centre of mass of local flockmates."""

    name = "Cohesion Rule"
    explanation = "Steer to move toward center of mass of nearby boids."
    base_weight_multiplier = 1.0

    def __init__(self, world: Any, weight: float = 1.0, is_enabled: bool = True) -> None:
        super().__init__(world, CYAN, weight, is_enabled)

    def compute_force(self, neighborhood: Sequence[Any], boid: Any) -> Vec2:
        if not neighborhood:
            return Vec2()
        total = Vec2()
        for other in neighborhood:
            total = total + other.position
        centre = total / len(neighborhood)
        return (centre - boid.position).normalized()


class MouseInfluenceRule(FlockingRule):
    """Steer toward, or away from, the mouse while its button is held."""

    name = "Mouse Click Influence"
    explanation = "Steer toward or away the mouse when clicked."
    base_weight_multiplier = 0.1
    strength = 100.0

    def __init__(
        self,
        world: Any,
        weight: float = 1.0,
        is_repulsive: bool = False,
        is_enabled: bool = True,
    ) -> None:
        super().__init__(world, MAGENTA, weight, is_enabled)
        self.is_repulsive = is_repulsive

    def compute_force(self, neighborhood: Sequence[Any], boid: Any) -> Vec2:
        mouse = getattr(self.world, "mouse_position", None)
        if mouse is None:
            return Vec2()
        displacement = Vec2(*mouse) - boid.position
        distance = displacement.magnitude()
        if distance == 0:
            return Vec2()
        force = displacement.normalized() * (self.strength / distance)
        return -force if self.is_repulsive else force


class SeparationRule(FlockingRule):
    """Steer away from flockmates that come too close."""

    name = "Separation Rule"
    explanation = "Steer to avoid collision with nearby boids."
    base_weight_multiplier = 1.0

    def __init__(
        self,
        world: Any,
        desired_separation: float = 20.0,
        weight: float = 1.0,
        is_enabled: bool = True,
    ) -> None:
        super().__init__(world, RED, weight, is_enabled)
        self.desired_minimal_distance = desired_separation

    def compute_force(self, neighborhood: Sequence[Any], boid: Any) -> Vec2:
        limit = self.desired_minimal_distance
        position = boid.position
        force = Vec2()
        for other in neighborhood:
            away = position - other.position
            distance = away.magnitude()
            if 0 < distance < limit:
                force = force + away / (distance * distance)
        return force.normalized()


class WindRule(FlockingRule):
    """A constant force in the direction of the wind angle (radians)."""

    name = "Wind Force"
    explanation = "Apply a constant force to all boids."
    base_weight_multiplier = 0.5

    def __init__(
        self,
        world: Any,
        weight: float = 1.0,
        angle: float = 0.0,
        is_enabled: bool = True,
    ) -> None:
        super().__init__(world, WHITE, weight, is_enabled)
        self.wind_angle = angle

    def compute_force(self, neighborhood: Sequence[Any], boid: Any) -> Vec2:
        return Vec2(math.cos(self.wind_angle), math.sin(self.wind_angle))