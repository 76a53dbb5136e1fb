"""Flocking steering rules: separation, alignment and cohesion."""

from __future__ import annotations

from typing import Iterable

from .boid import Boid
from .vector import EPSILON, Vec3

Neighbor = tuple[Boid, float]


def _steer_towards(boid: Boid, desired: Vec3, max_speed: float, max_force: float) -> Vec3:
    """Steering force that turns the boid's velocity towards ``desired``."""
    if desired.length_sqr() <= EPSILON:
        return Vec3()
    target = desired.normalized() * max_speed
    return (target - boid.velocity).limited(max_force)


def _within(distance_sq: float, radius_sq: float) -> bool:
    return EPSILON < distance_sq < radius_sq


def separation(
    boid: Boid,
    neighbors: Iterable[Neighbor],
    radius_sq: float,
    max_speed: float,
    max_force: float,
) -> Vec3:
    """Push away from neighbours closer than the separation radius, nearer ones harder."""
    steer = Vec3()
    count = 0
    for other, distance_sq in neighbors:
        if _within(distance_sq, radius_sq):
            steer = steer + (boid.position - other.position) * (1.0 / distance_sq)
            count += 1
    if count == 0:
        return Vec3()
    return _steer_towards(boid, steer, max_speed, max_force)


def alignment(
    boid: Boid,
    neighbors: Iterable[Neighbor],
    radius_sq: float,
    max_speed: float,
    max_force: float,
) -> Vec3:
    """Steer towards the average heading of neighbours within the perception radius."""
    total = Vec3()
    count = 0
    for other, distance_sq in neighbors:
        if _within(distance_sq, radius_sq):
            total = total + other.velocity
            count += 1
    if count == 0:
        return Vec3()
    return _steer_towards(boid, total * (1.0 / count), max_speed, max_force)


def cohesion(
    boid: Boid,
    neighbors: Iterable[Neighbor],
    radius_sq: float,
    max_speed: float,
    max_force: float,
) -> Vec3:
    """Steer towards the centre of mass of neighbours within the perception radius."""
    total = Vec3()
    count = 0
    for other, distance_sq in neighbors:
        if _within(distance_sq, radius_sq):
            total = total + other.position
            count += 1
    if count == 0:
        return Vec3()
    centre = total * (1.0 / count)
    return _steer_towards(boid, centre - boid.position, max_speed, max_force)