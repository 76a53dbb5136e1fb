"""Perspective camera and software drawing of the flock inside its box."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from itertools import product

import pygame

from .boid import BOID_SIZE
from .simulation import Simulation
from .vector import EPSILON, Vec3

BACKGROUND = (30, 43, 56)
WIRE_COLOR = (130, 130, 130)
RESTING_COLOR = (80, 80, 80)
BOID_COLOR = (255, 161, 0)
NEAR_PLANE = 0.01
CONE_HEIGHT = BOID_SIZE * 2.5
CONE_TAIL = 0.33
CONE_HEAD = 0.67
RESTING_RADIUS = BOID_SIZE * 0.8

ScreenPoint = tuple[float, float, float]


def _dot(a: Vec3, b: Vec3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


@dataclass
class Camera:
    """A perspective camera looking from ``position`` at ``target``."""

    position: Vec3
    target: Vec3
    up: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))
    fovy: float = 50.0

    @classmethod
    def for_cube(cls, cube: Vec3) -> Camera:
        """Camera in front of the cube, slightly above, aimed at its centre."""
        position = Vec3(cube.x / 2.0, cube.y / 1.5, cube.z * 2.5)
        target = Vec3(cube.x / 2.0, cube.y / 2.0, cube.z / 2.0)
        return cls(position, target)

    def orbit(self, angle: float) -> None:
        """Rotate the camera around its target about the up axis by ``angle`` radians."""
        axis = self.up.normalized()
        offset = self.position - self.target
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        rotated = (
            offset * cos_a
            + _cross(axis, offset) * sin_a
            + axis * (_dot(axis, offset) * (1.0 - cos_a))
        )
        self.position = self.target + rotated

    def _basis(self) -> tuple[Vec3, Vec3, Vec3]:
        forward = (self.target - self.position).normalized()
        right = _cross(forward, self.up).normalized()
        true_up = _cross(right, forward)
        return forward, right, true_up

    def _focal(self) -> float:
        return 1.0 / math.tan(math.radians(self.fovy) / 2.0)

    def project(self, point: Vec3, width: int, height: int) -> ScreenPoint | None:
        """Screen ``(x, y, depth)`` of a point, or ``None`` when it is behind the camera."""
        forward, right, true_up = self._basis()
        relative = point - self.position
        depth = _dot(relative, forward)
        if depth <= NEAR_PLANE:
            return None
        focal = self._focal()
        aspect = width / height if height else 1.0
        ndc_x = _dot(relative, right) * focal / aspect / depth
        ndc_y = _dot(relative, true_up) * focal / depth
        return ((ndc_x + 1.0) * 0.5 * width, (1.0 - ndc_y) * 0.5 * height, depth)

    def pixel_size(self, size: float, depth: float, height: int) -> float:
        """On-screen length in pixels of ``size`` world units seen at ``depth``."""
        return size * self._focal() * height / 2.0 / depth


def _draw_cube_wires(surface: pygame.Surface, camera: Camera, cube: Vec3) -> None:
    width, height = surface.get_size()
    corners = [Vec3(*c) for c in product((0.0, cube.x), (0.0, cube.y), (0.0, cube.z))]
    projected = [camera.project(corner, width, height) for corner in corners]
    for i, a in enumerate(corners):
        for j in range(i + 1, len(corners)):
            b = corners[j]
            differing = sum(1 for p, q in zip(a, b) if p != q)
            if differing != 1:
                continue
            pa, pb = projected[i], projected[j]
            if pa is None or pb is None:
                continue
            pygame.draw.line(surface, WIRE_COLOR, pa[:2], pb[:2])


def _draw_boid(surface: pygame.Surface, camera: Camera, position: Vec3, velocity: Vec3) -> None:
    width, height = surface.get_size()
    if velocity.length_sqr() < EPSILON * EPSILON:
        centre = camera.project(position, width, height)
        if centre is None:
            return
        radius = max(1, round(camera.pixel_size(RESTING_RADIUS, centre[2], height)))
        pygame.draw.circle(surface, RESTING_COLOR, (round(centre[0]), round(centre[1])), radius)
        return

    heading = velocity.normalized()
    base = camera.project(position - heading * (CONE_HEIGHT * CONE_TAIL), width, height)
    tip = camera.project(position + heading * (CONE_HEIGHT * CONE_HEAD), width, height)
    if base is None or tip is None:
        return
    half = max(1.0, camera.pixel_size(BOID_SIZE, base[2], height))
    dx, dy = tip[0] - base[0], tip[1] - base[1]
    span = math.hypot(dx, dy)
    if span > 0.0:
        nx, ny = -dy / span * half, dx / span * half
        pygame.draw.polygon(
            surface,
            BOID_COLOR,
            [(tip[0], tip[1]), (base[0] + nx, base[1] + ny), (base[0] - nx, base[1] - ny)],
        )
    pygame.draw.line(surface, BOID_COLOR, base[:2], tip[:2])


def draw_scene(surface: pygame.Surface, camera: Camera, sim: Simulation) -> None:
    """Clear ``surface`` and draw the box wireframe and every active boid, far ones first."""
    surface.fill(BACKGROUND)
    _draw_cube_wires(surface, camera, sim.cube)
    forward = (camera.target - camera.position).normalized()
    boids = sorted(
        sim.active_boids(),
        key=lambda boid: _dot(boid.position - camera.position, forward),
        reverse=True,
    )
    for boid in boids:
        _draw_boid(surface, camera, boid.position, boid.velocity)