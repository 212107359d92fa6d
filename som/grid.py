"""
SOM grid coordinates.

Uses NumPy to lay out the (static) grid, returns JAX arrays.
"""

import jax.numpy as jnp
import numpy as np
from jax import Array

from .options import UnitShape

# Row spacing that keeps hexagonal neighbours at unit distance
HEX_ROW_HEIGHT = np.sqrt(3.0) / 2.0


def grid_coords(dims, unit_shape: str = "hexagon") -> Array:
    """
    Generate planar coordinates of all SOM units.

    Units are enumerated with the width index outermost. For hexagonal
    units every odd row is shifted by half a unit along x and rows are
    packed at sqrt(3)/2 spacing, so each interior unit has six neighbours
    at distance 1.

    Parameters
    ----------
    dims : sequence of int
        Grid dimensions (width, height).
    unit_shape : str, optional
        Unit shape: 'hexagon' or 'rectangle'. Default is 'hexagon',
        matching MapConfig.

    Returns
    -------
    Array
        Unit coordinates, shape (width * height, 2).

    Raises
    ------
    ValueError
        If dims is not a pair of non-negative integers (integral floats
        such as 3.0 are accepted) or the unit shape is not recognized.
    """
    dims = tuple(dims)
    if len(dims) != 2:
        raise ValueError(f"Expected 2 grid dimensions, got {len(dims)}")
    if any(d < 0 for d in dims):
        raise ValueError(f"Grid dimensions must be non-negative: {dims}")
    if any(int(d) != d for d in dims):
        raise ValueError(f"Grid dimensions must be integers: {dims}")

    shape = UnitShape(unit_shape)
    width, height = (int(d) for d in dims)

    i, j = np.meshgrid(np.arange(width), np.arange(height), indexing="ij")
    i = i.ravel()
    j = j.ravel()

    x = i.astype(np.float64)
    y = j.astype(np.float64)
    if shape == UnitShape.HEXAGON:
        x = x + 0.5 * (j % 2)
        y = y * HEX_ROW_HEIGHT

    return jnp.asarray(np.stack([x, y], axis=1))


def grid_distances(coords: Array) -> Array:
    """
    Pairwise Euclidean distances between SOM units.

    Parameters
    ----------
    coords : Array
        Unit coordinates, shape (n_units, n_dims).

    Returns
    -------
    Array
        Distance matrix, shape (n_units, n_units).
    """
    coords = jnp.asarray(coords)
    diff = coords[:, None, :] - coords[None, :, :]  # (n_units, n_units, n_dims)
    return jnp.sqrt(jnp.sum(diff**2, axis=-1))
