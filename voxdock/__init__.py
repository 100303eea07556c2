"""Voxelized pocket grids, ligand models, file readers and random pose generation."""

__version__ = "1.0.0"
__all__ = ["docker", "ligand", "parsing", "pocket"]