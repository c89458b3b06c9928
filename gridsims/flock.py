"""A flock of boids steered by weighted rules inside a wrapping window."""

from __future__ import annotations

import argparse
import random
from typing import Iterable, Sequence

from gridsims.rules import (
    RED,
    AlignmentRule,
    BoundedAreaRule,
    CohesionRule,
    Color,
    FlockingRule,
    MouseInfluenceRule,
    SeparationRule,
    Vec2,
    WindRule,
)

PURPLE: Color = (128, 0, 128, 255)
UP = Vec2(0.0, -1.0)
UNCAPPED_ACCELERATION = 10000.0


def _random_color(rng: random.Random, low: int = 31, high: int = 255) -> Color:
    return (rng.randint(low, high), rng.randint(low, high), rng.randint(low, high), 255)


class Particle:
    """A point mass with a speed limit and a per-frame acceleration cap."""

    def __init__(
        self,
        position: Vec2 = Vec2(),
        velocity: Vec2 = Vec2(),
        size: float = 4.0,
        color: Color | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.position = position
        self.rotation = Vec2()
        self.velocity = velocity
        self.size = size
        self.color = color if color is not None else _random_color(rng or random.Random())
        self.has_constant_speed = False
        self.speed = 120.0
        self.max_acceleration = 10.0
        self.acceleration = Vec2()
        self.previous_acceleration = Vec2()
        self.draw_acceleration = False

    @property
    def velocity(self) -> Vec2:
        return self._velocity

    @velocity.setter
    def velocity(self, value: Vec2) -> None:
        self._velocity = value
        self.rotation = value.normalized()

    def apply_force(self, force: Vec2) -> None:
        """Add a force to this frame's acceleration."""
        self.acceleration = self.acceleration + force

    def _reset_acceleration(self) -> None:
        self.previous_acceleration = self.acceleration
        self.acceleration = Vec2()

    def update(self, delta_time: float) -> None:
        """Integrate acceleration into velocity and velocity into position."""
        if self.acceleration.magnitude() > self.max_acceleration:
            self.acceleration = self.acceleration.normalized() * self.max_acceleration

        self.velocity = self.velocity + self.acceleration
        self._reset_acceleration()

        if self.has_constant_speed or self.velocity.magnitude() > self.speed:
            self.velocity = self.velocity.normalized() * self.speed

        self.position = self.position + self.velocity * delta_time


class Boid(Particle):
    """A particle that steers by its rules, looking at boids within its radius."""

    def __init__(self, world: "FlockWorld", **kwargs) -> None:
        kwargs.setdefault("rng", getattr(world, "rng", None))
        super().__init__(**kwargs)
        self.world = world
        self.detection_radius = 100.0
        self.rules: list[FlockingRule] = []
        self.draw_debug_radius = True
        self.draw_debug_rules = True
        self.circle_color: Color = PURPLE

    def set_flocking_rules(self, rules: Iterable[FlockingRule]) -> None:
        """Replace this boid's rules with copies of the given ones."""
        self.rules = [rule.clone() for rule in rules]

    def compute_neighborhood(self) -> list["Boid"]:
        """Other boids of the world within the detection radius."""
        limit = self.detection_radius * self.detection_radius
        return [
            other
            for other in self.world.boids
            if other is not self and self.position.squared_distance(other.position) <= limit
        ]

    def update(self, delta_time: float) -> None:
        """Move, then accumulate the weighted force of every rule."""
        super().update(delta_time)
        neighborhood = self.compute_neighborhood()
        for rule in self.rules:
            self.apply_force(rule.compute_weighted_force(neighborhood, self))


class FlockWorld:
    """The window, its boids and the rules they share."""

    def __init__(
        self,
        window_size: tuple[float, float] = (1280.0, 720.0),
        rng: random.Random | None = None,
    ) -> None:
        self.window_size = Vec2(*window_size)
        self.rng = rng if rng is not None else random.Random()
        self.mouse_position: Vec2 | None = None

        self.nb_boids = 300
        self.has_constant_speed = False
        self.desired_speed = 120.0
        self.has_max_acceleration = False
        self.max_acceleration = 10.0
        self.detection_radius = 35.0

        self.show_radius = False
        self.show_rules = False
        self.show_acceleration = False

        self.rules: list[FlockingRule] = []
        self.default_weights: list[float] = []
        self.boids: list[Boid] = []

    def initialize_rules(self) -> None:
        """Install the starting rules and remember their weights as defaults."""
        self.rules = [
            SeparationRule(self, 25.0, 4.75),
            CohesionRule(self, 4.25),
            AlignmentRule(self, 2.9),
            MouseInfluenceRule(self, 2.0),
            BoundedAreaRule(self, 20, 8.0, False),
            WindRule(self, 1.0, 6.0, False),
        ]
        self.default_weights = [rule.weight for rule in self.rules]

    def apply_flocking_rules_to_all_boids(self) -> None:
        for boid in self.boids:
            boid.set_flocking_rules(self.rules)

    def set_number_of_boids(self, number: int) -> None:
        """Add or remove boids (from the end) until there are `number`; negatives mean zero."""
        number = max(0, number)
        self.nb_boids = number
        while len(self.boids) < number:
            self.boids.append(self.create_boid())
        del self.boids[number:]

    def randomize_boid(self, boid: Boid) -> None:
        """Put a boid anywhere in the window, heading a random way at the desired speed."""
        boid.position = Vec2(
            self.rng.uniform(0.0, self.window_size.x),
            self.rng.uniform(0.0, self.window_size.y),
        )
        boid.velocity = UP.rotated(self.rng.uniform(0.0, 360.0)) * self.desired_speed

    def warp_particle_if_out_of_bounds(self, particle: Particle) -> None:
        """Wrap a particle that left the window back in on the other side."""
        x, y = particle.position
        width, height = self.window_size
        if x < 0:
            x += width
        elif x > width:
            x -= width
        if y < 0:
            y += height
        elif y > height:
            y -= height
        particle.position = Vec2(x, y)

    def create_boid(self) -> Boid:
        """A new boid configured with the current settings (not yet added)."""
        boid = Boid(self)
        self.randomize_boid(boid)
        boid.set_flocking_rules(self.rules)
        boid.detection_radius = self.detection_radius
        boid.speed = self.desired_speed
        boid.has_constant_speed = self.has_constant_speed
        boid.draw_acceleration = self.show_acceleration
        boid.draw_debug_radius = self.show_radius
        boid.draw_debug_rules = self.show_rules
        return boid

    def restore_default_weights(self) -> None:
        for rule, weight in zip(self.rules, self.default_weights):
            rule.weight = weight
        self.apply_flocking_rules_to_all_boids()

    def set_detection_radius(self, radius: float) -> None:
        self.detection_radius = radius
        for boid in self.boids:
            boid.detection_radius = radius

    def set_speed(self, speed: float) -> None:
        self.desired_speed = speed
        for boid in self.boids:
            boid.speed = speed

    def set_constant_speed(self, enabled: bool) -> None:
        self.has_constant_speed = enabled
        for boid in self.boids:
            boid.has_constant_speed = enabled

    def set_max_acceleration(self, enabled: bool, value: float | None = None) -> None:
        """Cap the boids' acceleration at `value`, or lift the cap when disabled."""
        self.has_max_acceleration = enabled
        if value is not None:
            self.max_acceleration = value
        cap = self.max_acceleration if enabled else UNCAPPED_ACCELERATION
        for boid in self.boids:
            boid.max_acceleration = cap

    def start(self) -> None:
        self.initialize_rules()
        self.set_number_of_boids(self.nb_boids)
        self.apply_flocking_rules_to_all_boids()

    def update(self, delta_time: float, input_arrow: Vec2 | None = None) -> None:
        """Steer the first boid by the arrow input, move every boid and wrap them."""
        if input_arrow is not None and input_arrow != Vec2() and self.nb_boids > 0 and self.boids:
            first = self.boids[0]
            first.apply_force(input_arrow * 20.0)
            first.draw_debug_radius = True
            first.circle_color = RED

        for boid in self.boids:
            boid.update(delta_time)
        for boid in self.boids:
            self.warp_particle_if_out_of_bounds(boid)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the flock for a number of frames and print a summary."""
    parser = argparse.ArgumentParser(description="Simulate a flock of boids.")
    parser.add_argument("--boids", type=int, default=300, help="number of boids")
    parser.add_argument("--steps", type=int, default=100, help="frames to simulate")
    parser.add_argument("--dt", type=float, default=1 / 60, help="seconds per frame")
    parser.add_argument("--width", type=float, default=1280.0)
    parser.add_argument("--height", type=float, default=720.0)
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    if args.steps < 0:
        parser.error("steps must not be negative")

    world = FlockWorld((args.width, args.height), random.Random(args.seed))
    world.nb_boids = max(0, args.boids)
    world.start()
    for _ in range(args.steps):
        world.update(args.dt)

    count = len(world.boids)
    print(f"Boids: {count}")
    if count:
        cx = sum(b.position.x for b in world.boids) / count
        cy = sum(b.position.y for b in world.boids) / count
        mean_speed = sum(b.velocity.magnitude() for b in world.boids) / count
        print(f"Centre: ({cx:.1f}, {cy:.1f})")
        print(f"Mean speed: {mean_speed:.1f}")
    return 0