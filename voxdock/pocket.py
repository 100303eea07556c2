"""Voxelised binding pocket holding per-channel field values."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

NUM_CHANNELS = 8
BASE_CELL_SIZE = 2.0


def trilerp(x: float, y: float, z: float, values: Sequence[float]) -> float:
    """Trilinear interpolation of eight corner values at fractional (x, y, z)."""
    if not all(0.0 <= t <= 1.0 for t in (x, y, z)):
        raise ValueError("interpolation weights must lie in [0, 1]")
    if len(values) != 8:
        raise ValueError("trilinear interpolation needs exactly eight values")

    v12 = values[0] * (1.0 - x) + values[1] * x
    v34 = values[2] * (1.0 - x) + values[3] * x
    v56 = values[4] * (1.0 - x) + values[5] * x
    v78 = values[6] * (1.0 - x) + values[7] * x

    v1234 = v12 * (1.0 - y) + v34 * y
    v5678 = v56 * (1.0 - y) + v78 * y

    return v1234 * (1.0 - z) + v5678 * z


@dataclass(frozen=True)
class Point:
    """A pocket sample: an (x, y, z) position and one value per channel."""

    pos: tuple[float, float, float]
    channels: tuple[float, ...]

    def __post_init__(self) -> None:
        pos = tuple(float(v) for v in self.pos)
        channels = tuple(float(v) for v in self.channels)
        if len(pos) != 3:
            raise ValueError("point position must have three coordinates")
        if len(channels) != NUM_CHANNELS:
            raise ValueError(f"a point must have {NUM_CHANNELS} channel values")
        object.__setattr__(self, "pos", pos)
        object.__setattr__(self, "channels", channels)

    def __str__(self) -> str:
        x, y, z = self.pos
        parts = [f"x={x:g}, y={y:g}, z={z:g}"]
        parts.extend(f", psi{c}={v:g}" for c, v in enumerate(self.channels))
        return "".join(parts)


def _check_axis(cartesian_axis: int) -> int:
    if not 0 <= cartesian_axis < 3:
        raise IndexError(f"axis {cartesian_axis} out of range")
    return cartesian_axis


class Pocket:
    """A regular grid of averaged channel values covering the pocket's bounding box.

    Voxels are stored as (depth, height, width), that is (z, y, x); the public
    ``shape`` and ``domain_size`` accessors take Cartesian axes (0 = x).
    The grid spans the box from (0, 0, 0) to the domain size along each axis.
    """

    def __init__(self, points: Iterable[Point], cell_size: float) -> None:
        if cell_size <= 0:
            raise ValueError("cell size must be positive")
        points = list(points)
        if not points:
            raise ValueError("a pocket needs at least one point")

        self._cell_size = float(cell_size)

        coords = np.array([p.pos for p in points], dtype=np.float64)
        values = np.array([p.channels for p in points], dtype=np.float64)

        low = coords.min(axis=0)
        extent = coords.max(axis=0) - low

        # Storage order is (z, y, x).
        self._domain = tuple(float(v) for v in extent[::-1])
        self._shape = tuple(
            int(math.ceil(d / self._cell_size)) for d in self._domain
        )
        if 0 in self._shape:
            raise ValueError("pocket points must span a non-zero extent on every axis")

        subs = np.floor((coords - low)[:, ::-1] / self._cell_size).astype(np.int64)
        subs = np.minimum(subs, np.array(self._shape) - 1)
        flat = np.ravel_multi_index(tuple(subs.T), self._shape)

        size = self.size
        counts = np.bincount(flat, minlength=size)
        divisor = np.maximum(counts, 1)
        grid = np.stack(
            [
                np.bincount(flat, weights=values[:, c], minlength=size) / divisor
                for c in range(NUM_CHANNELS)
            ]
        ).reshape((NUM_CHANNELS, *self._shape))
        grid.flags.writeable = False
        self._grid = grid

    @property
    def cell_size(self) -> float:
        return self._cell_size

    @property
    def size(self) -> int:
        """Number of voxels per channel."""
        return math.prod(self._shape)

    def shape(self, cartesian_axis: int) -> int:
        """Number of voxels along a Cartesian axis (0 = x, 1 = y, 2 = z)."""
        return self._shape[2 - _check_axis(cartesian_axis)]

    def domain_size(self, cartesian_axis: int) -> float:
        """Extent of the pocket along a Cartesian axis (0 = x, 1 = y, 2 = z)."""
        return self._domain[2 - _check_axis(cartesian_axis)]

    def _check_channel(self, c: int) -> None:
        if not 0 <= c < NUM_CHANNELS:
            raise IndexError(f"channel {c} out of range")

    def voxel(self, c: int, i: int, j: int, k: int) -> float:
        """Value of channel ``c`` at storage subscript (i, j, k) = (z, y, x)."""
        self._check_channel(c)
        for index, extent in zip((i, j, k), self._shape):
            if not 0 <= index < extent:
                raise IndexError(f"voxel subscript {(i, j, k)} out of range")
        return float(self._grid[c, i, j, k])

    def voxels(self, c: int, i: int = 0) -> np.ndarray:
        """Read-only flat view of channel ``c`` starting at depth slice ``i``."""
        self._check_channel(c)
        if not 0 <= i < self._shape[0]:
            raise IndexError(f"depth slice {i} out of range")
        slab = self._shape[1] * self._shape[2]
        return self._grid[c].reshape(-1)[i * slab:]

    def _pos_to_sub(self, pos: Sequence[float]) -> tuple[int, int, int]:
        if len(pos) != 3:
            raise ValueError("position must have three coordinates")
        sub = []
        for value, domain, extent in zip(reversed(pos), self._domain, self._shape):
            if not 0.0 <= value <= domain:
                raise ValueError(f"position {tuple(pos)} lies outside the pocket")
            sub.append(min(int(value / self._cell_size), extent - 1))
        return tuple(sub)

    def lookup(self, pos: Sequence[float]) -> tuple[float, ...]:
        """Channel values of the voxel containing Cartesian position ``pos``."""
        i, j, k = self._pos_to_sub(pos)
        return tuple(float(v) for v in self._grid[:, i, j, k])