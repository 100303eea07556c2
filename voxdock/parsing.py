"""Readers for pocket CSV files and ligand MOL2 files."""

from __future__ import annotations

import os
import re
from typing import Iterator, Union

from .ligand import Atom, Ligand, get_atom_type_by_name
from .pocket import NUM_CHANNELS, Point, Pocket

PathLike = Union[str, "os.PathLike[str]"]

_CSV_SEPARATORS = re.compile(r"[ ,]")

# Columns before the coordinates: n, pocket_n, pocket_score, pocket_overlap.
_CSV_SKIPPED_FIELDS = 4
# x, y, z, psi, then psi1..psi8.
_CSV_MIN_FIELDS = _CSV_SKIPPED_FIELDS + 3 + 1 + NUM_CHANNELS


def _csv_fields(line: str) -> list[str]:
    return [token for token in _CSV_SEPARATORS.split(line) if token]


def _to_float(token: str, what: str, line_no: int) -> float:
    try:
        return float(token)
    except ValueError:
        raise ValueError(f"line {line_no}: invalid {what} {token!r}") from None


def read_pocket_csv(file_path: PathLike) -> list[Point]:
    """Read pocket points from a CSV file with a header line.

    Each row holds n, pocket_n, pocket_score, pocket_overlap, x, y, z, psi and
    psi1..psi8; fields may be separated by commas and/or spaces.
    """
    points: list[Point] = []
    with open(file_path, encoding="utf-8") as stream:
        next(stream, None)  # header
        for line_no, line in enumerate(stream, start=2):
            fields = _csv_fields(line.rstrip("\r\n"))
            if not fields:
                continue
            if len(fields) < _CSV_MIN_FIELDS:
                raise ValueError(
                    f"line {line_no}: expected at least {_CSV_MIN_FIELDS} fields, "
                    f"got {len(fields)}"
                )
            start = _CSV_SKIPPED_FIELDS
            pos = tuple(
                _to_float(token, "coordinate", line_no)
                for token in fields[start:start + 3]
            )
            channel_start = start + 4  # skip the aggregate psi field
            channels = tuple(
                _to_float(token, "channel value", line_no)
                for token in fields[channel_start:channel_start + NUM_CHANNELS]
            )
            points.append(Point(pos, channels))
    return points


def _skip_past_section_marker(lines: Iterator[str], section: str) -> None:
    for line in lines:
        if "@" in line:
            return
    raise ValueError(f"missing {section} section")


def read_ligand_mol2(file_path: PathLike) -> list[Atom]:
    """Read the atoms of the first molecule in a MOL2 file."""
    with open(file_path, encoding="utf-8") as stream:
        lines = iter(stream.read().splitlines())

    _skip_past_section_marker(lines, "MOLECULE")
    if next(lines, None) is None:
        raise ValueError("missing molecule name")
    counts = next(lines, None)
    if counts is None or not counts.split():
        raise ValueError("missing atom count")
    try:
        num_atoms = int(counts.split()[0])
    except ValueError:
        raise ValueError(f"invalid atom count line {counts!r}") from None
    if num_atoms < 0:
        raise ValueError(f"negative atom count {num_atoms}")

    _skip_past_section_marker(lines, "ATOM")

    atoms: list[Atom] = []
    for index in range(num_atoms):
        line = next(lines, None)
        if line is None:
            raise ValueError(f"expected {num_atoms} atoms, found {index}")
        fields = line.split()
        if len(fields) < 6:
            raise ValueError(f"malformed atom record {line!r}")
        pos = tuple(
            _to_float(token, "coordinate", index + 1) for token in fields[2:5]
        )
        atoms.append(Atom(get_atom_type_by_name(fields[5]), pos))
    return atoms


def load_pocket(file_path: PathLike, cell_size: float) -> Pocket:
    """Read a pocket CSV file and voxelise it with the given cell size."""
    return Pocket(read_pocket_csv(file_path), cell_size)


def load_ligand(file_path: PathLike) -> Ligand:
    """Read a MOL2 file into a ligand centred on its centre of mass."""
    return Ligand(read_ligand_mol2(file_path))