# voxdock

voxdock turns a protein pocket into a regular voxel grid. The pocket is given
as a cloud of points, and each point carries eight feature channels. voxdock
also models a rigid ligand as typed atoms and generates random poses of that
ligand inside the pocket.

## Installation

```
pip install .
```

voxdock depends on numpy. To run the tests, install the `test` extra
(`pip install .[test]`) and run `pytest`.

## Modules

- `voxdock.pocket`: `Point`, `Pocket`, `trilerp`, and the constants
  `NUM_CHANNELS` (8) and `BASE_CELL_SIZE` (2.0).
- `voxdock.ligand`: `Atom`, `Ligand`, `get_atom_type_by_name`,
  `get_atom_channel_mask`, `get_atom_mass`, and `MAX_NUM_ATOMS` (64).
- `voxdock.parsing`: `read_pocket_csv`, `read_ligand_mol2`, `load_pocket`,
  `load_ligand`.
- `voxdock.docker`: `Docker`.

## Concepts

- **Pocket.** The pocket points are binned into cubic cells of a chosen size.
  Each voxel holds the average of every channel over the points that fall
  inside it. An empty voxel holds zeros. The grid spans the bounding box of
  the points, shifted so that its lower corner is at the origin. A pocket
  needs at least one point and a non-zero extent on every axis. The cell size
  must be positive. Any of these conditions left unmet raises `ValueError`.
- **Ligand.** A list of typed atoms, translated so that the centre of mass is
  at the origin. `Ligand.radius` is the distance from the centre of mass to the
  farthest atom. `Ligand.atoms` and `Ligand.num_atoms` are properties.
- **Atom types.** Each atom type has a mass (`get_atom_mass`) and an 8-bit
  channel mask (`get_atom_channel_mask`). Bit `c` of the mask selects pocket
  channel `c`.
- **Docker.** Generates random poses. A pose is a translation and three
  rotation angles, one about each of the x, y and z axes, each in
  `[0, 2*pi)`. The translation keeps the ligand's bounding sphere inside the
  pocket domain. The random generator is seeded (default seed 42), so runs
  can be repeated.

## Loading data

```python
from voxdock.parsing import load_pocket, load_ligand, read_pocket_csv, read_ligand_mol2

pocket = load_pocket("pocket.csv", 0.5)   # cell size in the same units as the coordinates
ligand = load_ligand("ligand.mol2")

points = read_pocket_csv("pocket.csv")    # list of voxdock.pocket.Point
atoms = read_ligand_mol2("ligand.mol2")   # list of voxdock.ligand.Atom
```

### Pocket CSV

The first line is a header and is skipped. Blank lines are also skipped.
Every other line holds one point. Its fields are separated by commas and/or
spaces, in this order:

1. four fields that are ignored (n, pocket_n, pocket_score, pocket_overlap)
2. `x`, `y`, `z`
3. one field that is ignored (psi)
4. eight channel values (psi1 to psi8)

A line with too few fields or a non-numeric value raises `ValueError`.

### Ligand mol2

The reader goes to the first line that contains `@`, which is the
`@<TRIPOS>MOLECULE` record. It skips the molecule name and reads the atom
count from the first number on the next line. It then goes to the next line
that contains `@`, the `@<TRIPOS>ATOM` record. From there it reads that many
atom lines, each holding `atom_id atom_name x y z atom_type ...`.

The supported SYBYL atom types are:

`N.4`, `C.3`, `C.2`, `O.co2`, `O.2`, `N.am`, `S.3`, `C.ar`, `H`

- Any other type raises `KeyError`.
- A missing section, a missing or bad atom count, or too few or malformed
  atom lines raises `ValueError`.

## Working with a pocket

```python
from voxdock.pocket import Pocket, Point

points = [
    Point((0.0, 0.0, 0.0), [1.0] * 8),
    Point((4.0, 4.0, 4.0), [2.0] * 8),
]
pocket = Pocket(points, 2.0)

pocket.shape(0), pocket.domain_size(0)   # per cartesian axis: 0 = x, 1 = y, 2 = z
pocket.size                              # total number of voxels per channel
pocket.cell_size
pocket.voxel(0, 1, 1, 1)                 # channel 0 at depth 1, height 1, width 1
pocket.voxels(0)                         # read-only flat numpy view of channel 0
pocket.lookup((1.0, 1.0, 1.0))           # tuple of the 8 channel values at a position
```

Voxels are stored in (depth, height, width) order, that is (z, y, x).
`shape` and `domain_size` take a cartesian axis. `lookup` takes an `(x, y, z)`
position within the pocket domain; a position outside raises `ValueError`.
Out-of-range subscripts, channels or axes raise `IndexError`.

`trilerp(x, y, z, values)` interpolates eight corner values trilinearly at
fractional coordinates in `[0, 1]`.

`str()` of a `Point` or an `Atom` gives a one-line summary, for example
`x=1, y=2, z=3, type=7`.

## Generating poses

```python
from voxdock.docker import Docker

docker = Docker(pocket, ligand, 42)
docker.generate_random_poses(1024)
docker.translations   # tuple of (x, y, z) translations
docker.rotations      # tuple of (rx, ry, rz) angles in radians
```

Each call to `generate_random_poses` replaces the previous poses. A negative
count raises `ValueError`.

## What voxdock does not do

- It does not score poses. Nothing rotates and translates the ligand atoms
  into a pose or sums the masked pocket channels over them.
- It offers no GPU execution.
- It has no command-line program. It is used as a library only.