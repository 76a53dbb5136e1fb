"""State and per-frame update of the whole flock."""

from __future__ import annotations

import logging
import random

from .boid import MAX_BOIDS, Boid, avoid_edges
from .grid import SpatialGrid
from .rules import alignment, cohesion, separation
from .vector import EPSILON, Vec3

log = logging.getLogger(__name__)

DEFAULT_SCREEN_WIDTH = 2560
DEFAULT_SCREEN_HEIGHT = 1440
MIN_CELL_SIZE = 1.0


class Simulation:
    """A flock of boids inside a box, with tunable rules and a spatial grid."""

    def __init__(self, seed: int | None = None) -> None:
        self.rng = random.Random(seed)

        self.cube = Vec3(400.0, 300.0, 300.0)
        self.num_boids = 100
        self.max_speed = 3.0
        self.max_force = 0.08
        self.perception_radius = 50.0
        self.separation_radius = 25.0
        self.edge_margin = 30.0
        self.separation_weight = 1.5
        self.alignment_weight = 1.0
        self.cohesion_weight = 1.0
        self.edge_avoid_weight = 2.0

        self.paused = False
        self.separation_active = True
        self.alignment_active = True
        self.cohesion_active = True
        self.edge_avoid_active = True
        self.auto_rotate_camera = True

        self.screen_width = DEFAULT_SCREEN_WIDTH
        self.screen_height = DEFAULT_SCREEN_HEIGHT

        self.perception_radius_sq = 0.0
        self.separation_radius_sq = 0.0
        self.grid_cell_size = max(self.perception_radius, MIN_CELL_SIZE)
        self.grid: SpatialGrid | None = None

        self.boids: list[Boid] = [self._spawn(i < self.num_boids) for i in range(MAX_BOIDS)]

        self.update_dimensions()
        self.update_squared_radii()

    def _spawn(self, active: bool) -> Boid:
        return Boid.spawn(self.rng, active, self.cube, self.edge_margin, self.max_speed)

    def update_squared_radii(self) -> None:
        """Recompute squared radii and resize the grid if the cell size changed."""
        self.perception_radius_sq = self.perception_radius * self.perception_radius
        self.separation_radius_sq = self.separation_radius * self.separation_radius
        old_cell_size = self.grid_cell_size
        self.grid_cell_size = max(self.perception_radius, MIN_CELL_SIZE)
        if abs(self.grid_cell_size - old_cell_size) > EPSILON:
            self.update_dimensions()

    def update_dimensions(self) -> None:
        """Fit the spatial grid to the current cube and cell size."""
        if self.grid is None:
            self.grid = SpatialGrid(self.cube, self.grid_cell_size)
        else:
            self.grid.resize(self.cube, self.grid_cell_size)

    def update_grid(self) -> None:
        """Re-bucket the active boids by position."""
        assert self.grid is not None
        if self.num_boids == 0:
            self.grid.clear()
            return
        self.grid.rebuild(self.boids[: self.num_boids])

    def update(self) -> None:
        """Advance the flock by one frame unless paused."""
        if self.paused:
            return
        self.update_grid()
        assert self.grid is not None

        flock = self.boids[: self.num_boids]
        for index, boid in enumerate(flock):
            if not boid.active:
                continue
            neighbors = list(self.grid.neighbors(flock, index))
            if self.separation_active:
                force = separation(
                    boid, neighbors, self.separation_radius_sq, self.max_speed, self.max_force
                )
                boid.apply_force(force * self.separation_weight)
            if self.alignment_active:
                force = alignment(
                    boid, neighbors, self.perception_radius_sq, self.max_speed, self.max_force
                )
                boid.apply_force(force * self.alignment_weight)
            if self.cohesion_active:
                force = cohesion(
                    boid, neighbors, self.perception_radius_sq, self.max_speed, self.max_force
                )
                boid.apply_force(force * self.cohesion_weight)
            if self.edge_avoid_active:
                boid.apply_force(
                    avoid_edges(
                        boid,
                        self.cube,
                        self.edge_margin,
                        self.max_speed,
                        self.max_force,
                        self.edge_avoid_weight,
                    )
                )

        for boid in flock:
            if boid.active:
                boid.step(self.max_speed, self.cube)

    def reset(self) -> None:
        """Respawn every boid, keeping the current count and parameters."""
        self.boids = [self._spawn(i < self.num_boids) for i in range(MAX_BOIDS)]
        self.update_grid()
        log.info("Simulation reset.")

    def set_boid_count(self, count: int) -> None:
        """Change the number of active boids, clamped to ``0..MAX_BOIDS``."""
        old = self.num_boids
        count = min(max(count, 0), MAX_BOIDS)
        self.num_boids = count
        if count > old:
            for index in range(old, count):
                self.boids[index] = self._spawn(True)
        else:
            for boid in self.boids[count:old]:
                boid.active = False
        log.info("Boid count set to %d", count)

    def toggle_pause(self) -> None:
        """Pause a running simulation or resume a paused one."""
        self.paused = not self.paused
        log.info("Simulation %s.", "paused" if self.paused else "resumed")

    def active_boids(self) -> list[Boid]:
        """The boids currently taking part in the flock."""
        return [boid for boid in self.boids[: self.num_boids] if boid.active]