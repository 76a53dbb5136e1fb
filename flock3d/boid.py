"""A single boid: spawning, force accumulation, integration and edge avoidance."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .vector import EPSILON, Vec3

MAX_BOIDS = 1000
BOID_SIZE = 2.5
EDGE_BUFFER = 0.1
MIN_SPAWN_SPEED = 0.5


def random_float(rng: random.Random, low: float, high: float) -> float:
    """Uniform value between ``low`` and ``high``; ``low`` when the range is empty."""
    if low >= high:
        return low
    return low + rng.random() * (high - low)


def _clamp_axis(value: float, size: float) -> float:
    if value < EDGE_BUFFER:
        return EDGE_BUFFER
    if value > size - EDGE_BUFFER:
        return size - EDGE_BUFFER
    return value


@dataclass
class Boid:
    """One member of the flock."""

    position: Vec3 = field(default_factory=Vec3)
    velocity: Vec3 = field(default_factory=Vec3)
    acceleration: Vec3 = field(default_factory=Vec3)
    active: bool = True

    @classmethod
    def spawn(
        cls,
        rng: random.Random,
        active: bool,
        cube: Vec3,
        edge_margin: float,
        max_speed: float,
    ) -> Boid:
        """Create a boid at a random spot inside the cube's margins, moving randomly."""
        spans = [
            size - 2 * edge_margin if size > 2 * edge_margin else 1.0 for size in cube
        ]
        position = Vec3(*(edge_margin + random_float(rng, 0.0, span) for span in spans))

        direction = Vec3(*(random_float(rng, -1.0, 1.0) for _ in range(3)))
        if direction.length_sqr() < EPSILON:
            direction = Vec3(1.0, 0.0, 0.0)
        direction = direction.normalized()

        speed = max(random_float(rng, 0.5 * max_speed, max_speed), MIN_SPAWN_SPEED)
        return cls(position, direction * speed, Vec3(), active)

    def apply_force(self, force: Vec3) -> None:
        """Add a steering force to this frame's acceleration."""
        self.acceleration = self.acceleration + force

    def step(self, max_speed: float, cube: Vec3) -> None:
        """Integrate one frame and keep the boid just inside the cube."""
        self.velocity = (self.velocity + self.acceleration).limited(max_speed)
        moved = self.position + self.velocity
        self.acceleration = Vec3()
        self.position = Vec3(
            _clamp_axis(moved.x, cube.x),
            _clamp_axis(moved.y, cube.y),
            _clamp_axis(moved.z, cube.z),
        )


def _edge_component(value: float, size: float, edge_margin: float, max_speed: float) -> float:
    if value < edge_margin:
        return max_speed
    if value > size - edge_margin:
        return -max_speed
    return 0.0


def avoid_edges(
    boid: Boid,
    cube: Vec3,
    edge_margin: float,
    max_speed: float,
    max_force: float,
    weight: float,
) -> Vec3:
    """Steering force turning the boid away from any cube face closer than the margin."""
    desired = Vec3(
        _edge_component(boid.position.x, cube.x, edge_margin, max_speed),
        _edge_component(boid.position.y, cube.y, edge_margin, max_speed),
        _edge_component(boid.position.z, cube.z, edge_margin, max_speed),
    )
    if desired.length_sqr() <= EPSILON:
        return Vec3()
    desired = desired.normalized() * max_speed
    return (desired - boid.velocity).limited(max_force * weight)