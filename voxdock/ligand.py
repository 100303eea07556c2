"""Ligand model: typed atoms recentred on their centre of mass."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

MAX_NUM_ATOMS = 64

_ATOM_TYPES: dict[str, int] = {
    "N.4": 0,
    "C.3": 1,
    "C.2": 2,
    "O.co2": 3,
    "O.2": 4,
    "N.am": 5,
    "S.3": 6,
    "C.ar": 7,
    "H": 8,
}

# Bit c of a mask selects pocket channel c:
# symmetric, gravitational, electrostatic, lipophilicity,
# hydrophilicity, polar, HB acceptor, HB donor.
_CHANNEL_MASKS: tuple[int, ...] = (
    0b01100101,
    0b10101000,
    0b00101101,
    0b11111100,
    0b01111101,
    0b01100101,
    0b10011011,
    0b01101101,
    0b10010010,
)

_ATOM_MASSES: tuple[float, ...] = (
    14.01,
    12.01,
    12.01,
    16.00,
    16.00,
    14.01,
    32.07,
    12.01,
    1.008,
)


def _check_atom_type(atom_type: int) -> int:
    if not 0 <= atom_type < len(_ATOM_MASSES):
        raise IndexError(f"unknown atom type {atom_type}")
    return atom_type


def get_atom_type_by_name(name: str) -> int:
    """Return the numeric atom type for a SYBYL type name such as ``C.ar``."""
    try:
        return _ATOM_TYPES[name]
    except KeyError:
        raise KeyError(f"unknown atom type name {name!r}") from None


def get_atom_channel_mask(atom_type: int) -> int:
    """Return the bit mask of pocket channels this atom type interacts with."""
    return _CHANNEL_MASKS[_check_atom_type(atom_type)]


def get_atom_mass(atom_type: int) -> float:
    """Return the atomic mass associated with an atom type."""
    return _ATOM_MASSES[_check_atom_type(atom_type)]


@dataclass(frozen=True)
class Atom:
    """A ligand atom: its type and its (x, y, z) position."""

    type: int
    pos: tuple[float, float, float]

    def __post_init__(self) -> None:
        pos = tuple(float(v) for v in self.pos)
        if len(pos) != 3:
            raise ValueError("atom position must have three coordinates")
        object.__setattr__(self, "pos", pos)

    def __str__(self) -> str:
        x, y, z = self.pos
        return f"x={x:g}, y={y:g}, z={z:g}, type={self.type}"


class Ligand:
    """A rigid ligand whose centre of mass sits at the origin."""

    def __init__(self, atoms: Iterable[Atom]) -> None:
        atoms = list(atoms)
        masses = [get_atom_mass(atom.type) for atom in atoms]
        total_mass = sum(masses)

        if atoms:
            com = tuple(
                sum(atom.pos[axis] * mass for atom, mass in zip(atoms, masses))
                / total_mass
                for axis in range(3)
            )
        else:
            com = (0.0, 0.0, 0.0)

        self._atoms = tuple(
            Atom(atom.type, tuple(p - c for p, c in zip(atom.pos, com)))
            for atom in atoms
        )
        self._radius = max(
            (math.sqrt(sum(p * p for p in atom.pos)) for atom in self._atoms),
            default=0.0,
        )

    @property
    def atoms(self) -> tuple[Atom, ...]:
        """The atoms, translated so the centre of mass is the origin."""
        return self._atoms

    @property
    def num_atoms(self) -> int:
        return len(self._atoms)

    @property
    def radius(self) -> float:
        """Distance from the centre of mass to the farthest atom."""
        return self._radius