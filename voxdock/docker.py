"""Random pose generation for rigid ligand docking in a voxelised pocket."""

from __future__ import annotations

import math
import random

from .ligand import Ligand
from .pocket import Pocket

Vec3 = tuple[float, float, float]


class Docker:
    """Generates candidate ligand poses (translation and rotation) in a pocket."""

    def __init__(self, pocket: Pocket, ligand: Ligand, seed: int = 42) -> None:
        self._pocket = pocket
        self._ligand = ligand
        self._rng = random.Random(seed)
        self._translations: list[Vec3] = []
        self._rotations: list[Vec3] = []

    @property
    def pocket(self) -> Pocket:
        return self._pocket

    @property
    def ligand(self) -> Ligand:
        return self._ligand

    def generate_random_poses(self, num_poses: int) -> None:
        """Replace the current poses with ``num_poses`` random ones.

        Translations keep the ligand's bounding sphere inside the pocket domain
        along every axis; rotation angles are uniform in [0, 2*pi).
        """
        if num_poses < 0:
            raise ValueError("number of poses must not be negative")

        radius = self._ligand.radius
        domains = [self._pocket.domain_size(axis) for axis in range(3)]
        translations: list[Vec3] = []
        rotations: list[Vec3] = []

        for _ in range(num_poses):
            delta = []
            angles = []
            for domain in domains:
                delta.append(radius + self._rng.random() * (domain - 2 * radius))
                angles.append(self._rng.random() * 2 * math.pi)
            translations.append(tuple(delta))
            rotations.append(tuple(angles))

        self._translations = translations
        self._rotations = rotations

    @property
    def translations(self) -> tuple[Vec3, ...]:
        """Per-pose (x, y, z) translations of the ligand centre of mass."""
        return tuple(self._translations)

    @property
    def rotations(self) -> tuple[Vec3, ...]:
        """Per-pose rotation angles around the x, y and z axes, in radians."""
        return tuple(self._rotations)