"""Uniform spatial grid for finding nearby boids."""

from __future__ import annotations

import math
from itertools import product
from typing import Iterator, Sequence

from .boid import Boid
from .vector import EPSILON, Vec3

Cell = tuple[int, int, int]


def cell_of(position: Vec3, cube: Vec3, cell_size: float, dims: Cell) -> Cell:
    """Grid cell holding ``position``, clamped into the grid."""
    coords = []
    for value, size, dim in zip(position, cube, dims):
        clamped = max(0.0, min(value, size - EPSILON))
        index = int(clamped / cell_size)
        coords.append(min(max(index, 0), dim - 1))
    return (coords[0], coords[1], coords[2])


class SpatialGrid:
    """Buckets boid indices by cell so neighbour queries scan only adjacent cells."""

    def __init__(self, cube: Vec3, cell_size: float) -> None:
        self.cube = cube
        self.cell_size = cell_size
        self.dims: Cell = (0, 0, 0)
        self._cells: list[list[int]] = []
        self.resize(cube, cell_size)

    @property
    def num_cells(self) -> int:
        return self.dims[0] * self.dims[1] * self.dims[2]

    def resize(self, cube: Vec3, cell_size: float) -> None:
        """Recompute the grid dimensions for a cube and cell size."""
        if cell_size <= 0.0 or any(size <= 0.0 for size in cube):
            raise ValueError(
                f"invalid grid: cell size {cell_size} for cube {tuple(cube)}"
            )
        dims = tuple(max(1, math.ceil(size / cell_size)) for size in cube)
        self.cube = cube
        self.cell_size = cell_size
        if dims != self.dims or not self._cells:
            self.dims = (dims[0], dims[1], dims[2])
            self._cells = [[] for _ in range(self.num_cells)]

    def _flat(self, cell: Cell) -> int:
        cx, cy, cz = cell
        return cx + cy * self.dims[0] + cz * self.dims[0] * self.dims[1]

    def _contains(self, cell: Cell) -> bool:
        return all(0 <= c < d for c, d in zip(cell, self.dims))

    def clear(self) -> None:
        """Empty every cell."""
        for bucket in self._cells:
            bucket.clear()

    def occupants(self, cell: Cell) -> tuple[int, ...]:
        """Indices of the boids stored in a cell."""
        if not self._contains(cell):
            raise IndexError(f"cell {cell} outside grid of {self.dims}")
        return tuple(self._cells[self._flat(cell)])

    def cell_for(self, position: Vec3) -> Cell:
        """Cell of this grid holding ``position``."""
        return cell_of(position, self.cube, self.cell_size, self.dims)

    def rebuild(self, boids: Sequence[Boid]) -> None:
        """Place every active boid's index into the cell of its position."""
        self.clear()
        for index, boid in enumerate(boids):
            if boid.active:
                self._cells[self._flat(self.cell_for(boid.position))].append(index)

    def neighbors(self, boids: Sequence[Boid], index: int) -> Iterator[tuple[Boid, float]]:
        """Yield ``(other, distance_squared)`` for active boids in the 3x3x3 block around ``boids[index]``."""
        current = boids[index]
        cx, cy, cz = self.cell_for(current.position)
        for cell in product(
            range(cz - 1, cz + 2), range(cy - 1, cy + 2), range(cx - 1, cx + 2)
        ):
            ordered = (cell[2], cell[1], cell[0])
            if not self._contains(ordered):
                continue
            for other_index in self._cells[self._flat(ordered)]:
                if other_index == index or other_index >= len(boids):
                    continue
                other = boids[other_index]
                if not other.active:
                    continue
                yield other, current.position.distance_sqr(other.position)