import math

import pytest

from voxdock.docker import Docker
from voxdock.ligand import Atom, Ligand, get_atom_type_by_name
from voxdock.pocket import NUM_CHANNELS, Point, Pocket


def _pocket():
    points = [
        Point((0.0, 0.0, 0.0), (1.0,) * NUM_CHANNELS),
        Point((10.0, 8.0, 12.0), (2.0,) * NUM_CHANNELS),
        Point((5.0, 4.0, 6.0), (3.0,) * NUM_CHANNELS),
    ]
    return Pocket(points, 1.0)


def _ligand():
    carbon = get_atom_type_by_name("C.3")
    return Ligand(
        [
            Atom(carbon, (1.0, 0.0, 0.0)),
            Atom(carbon, (-1.0, 0.0, 0.0)),
            Atom(carbon, (0.0, 1.5, 0.0)),
        ]
    )


@pytest.fixture
def docker():
    return Docker(_pocket(), _ligand())


def test_no_poses_initially(docker):
    assert docker.translations == ()
    assert docker.rotations == ()


def test_generates_requested_number(docker):
    docker.generate_random_poses(50)
    assert len(docker.translations) == 50
    assert len(docker.rotations) == 50


def test_translations_keep_ligand_inside(docker):
    docker.generate_random_poses(200)
    radius = docker.ligand.radius
    for translation in docker.translations:
        for axis, value in enumerate(translation):
            domain = docker.pocket.domain_size(axis)
            assert radius <= value <= domain - radius


def test_rotations_within_full_turn(docker):
    docker.generate_random_poses(200)
    for angles in docker.rotations:
        assert all(0.0 <= angle < 2 * math.pi for angle in angles)


def test_same_seed_is_deterministic():
    first = Docker(_pocket(), _ligand(), seed=7)
    second = Docker(_pocket(), _ligand(), seed=7)
    first.generate_random_poses(20)
    second.generate_random_poses(20)
    assert first.translations == second.translations
    assert first.rotations == second.rotations


def test_default_seed_matches_explicit_default():
    implicit = Docker(_pocket(), _ligand())
    explicit = Docker(_pocket(), _ligand(), seed=42)
    implicit.generate_random_poses(10)
    explicit.generate_random_poses(10)
    assert implicit.translations == explicit.translations


def test_different_seeds_differ():
    first = Docker(_pocket(), _ligand(), seed=1)
    second = Docker(_pocket(), _ligand(), seed=2)
    first.generate_random_poses(10)
    second.generate_random_poses(10)
    assert first.translations != second.translations


def test_regenerating_replaces_poses(docker):
    docker.generate_random_poses(30)
    earlier = docker.translations
    docker.generate_random_poses(5)
    assert len(docker.translations) == 5
    assert len(docker.rotations) == 5
    assert docker.translations != earlier[:5]


def test_zero_poses_clears(docker):
    docker.generate_random_poses(10)
    docker.generate_random_poses(0)
    assert docker.translations == ()
    assert docker.rotations == ()


def test_negative_pose_count_raises(docker):
    with pytest.raises(ValueError):
        docker.generate_random_poses(-1)


def test_poses_are_three_dimensional(docker):
    docker.generate_random_poses(5)
    assert all(len(t) == 3 for t in docker.translations)
    assert all(len(r) == 3 for r in docker.rotations)