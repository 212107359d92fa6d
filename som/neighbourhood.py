"""
SOM neighbourhood functions and dispatcher.

Supports multiple neighbourhood types:
- Gaussian: h(d) = exp(-d²/2r²)
- Bubble: h(d) = 1 if d <= r else 0
- Mexican hat: h(d) = (1 - d²/r²) * exp(-d²/2r²)

A radius of 0 collapses every neighbourhood onto the winning unit:
weight 1 at distance 0, weight 0 elsewhere.
"""

from collections.abc import Mapping
from types import MappingProxyType

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from .options import NeighbourhoodType
from .types import NeighbFunc


def _collapsed(d: Array) -> Array:
    """Zero-radius neighbourhood: only the unit itself is updated."""
    return jnp.where(d == 0.0, 1.0, 0.0)


def gaussian(distance: ArrayLike, radius: float) -> Array:
    """
    Gaussian neighbourhood.

    h(d) = exp(-d²/2r²)

    Parameters
    ----------
    distance : ArrayLike
        Grid distances to the best matching unit.
    radius : float
        Neighbourhood radius r.

    Returns
    -------
    Array
        Weights in (0, 1], same shape as distance.
    """
    d = jnp.asarray(distance, dtype=float)
    r = jnp.where(radius > 0, radius, 1.0)
    return jnp.where(radius > 0, jnp.exp(-(d**2) / (2.0 * r**2)), _collapsed(d))


def bubble(distance: ArrayLike, radius: float) -> Array:
    """
    Bubble neighbourhood.

    h(d) = 1 if d <= r else 0

    Parameters
    ----------
    distance : ArrayLike
        Grid distances to the best matching unit.
    radius : float
        Neighbourhood radius r.

    Returns
    -------
    Array
        Weights in {0, 1}, same shape as distance.
    """
    d = jnp.asarray(distance, dtype=float)
    return jnp.where(d <= radius, 1.0, 0.0)


def mexican(distance: ArrayLike, radius: float) -> Array:
    """
    Mexican hat neighbourhood.

    h(d) = (1 - d²/r²) * exp(-d²/2r²)

    Parameters
    ----------
    distance : ArrayLike
        Grid distances to the best matching unit.
    radius : float
        Neighbourhood radius r.

    Returns
    -------
    Array
        Weights, same shape as distance. Negative for d > r.
    """
    d = jnp.asarray(distance, dtype=float)
    r = jnp.where(radius > 0, radius, 1.0)
    r2 = r**2
    hat = (1.0 - d**2 / r2) * jnp.exp(-(d**2) / (2.0 * r2))
    return jnp.where(radius > 0, hat, _collapsed(d))


# Name -> function, shared with the option registry
NEIGHBOURHOODS: Mapping[str, NeighbFunc] = MappingProxyType(
    {
        NeighbourhoodType.GAUSSIAN.value: gaussian,
        NeighbourhoodType.BUBBLE.value: bubble,
        NeighbourhoodType.MEXICAN.value: mexican,
    }
)


def apply_neighbourhood(
    distance: ArrayLike,
    radius: float,
    neighb_fn: str,
) -> Array:
    """
    Apply neighbourhood function to grid distances.

    Parameters
    ----------
    distance : ArrayLike
        Grid distances to the best matching unit.
    radius : float
        Neighbourhood radius.
    neighb_fn : str
        Neighbourhood type: 'gaussian', 'bubble', or 'mexican'.

    Returns
    -------
    Array
        Neighbourhood weights, same shape as distance.

    Raises
    ------
    ValueError
        If neighbourhood type is not recognized.
    """
    neighb_type = NeighbourhoodType(neighb_fn)
    return NEIGHBOURHOODS[neighb_type.value](distance, radius)
