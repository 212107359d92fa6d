"""Tests for grid coordinate generation."""

import jax.numpy as jnp
import numpy as np
import pytest

from som.grid import HEX_ROW_HEIGHT, grid_coords, grid_distances
from som.registry import GRID_COORDS, resolve
from som.types import MapConfig


class TestGridCoords:
    """Test planar grid coordinates."""

    def test_shape(self):
        coords = grid_coords((4, 3))
        assert coords.shape == (12, 2)

    def test_rectangle_layout(self):
        """Rectangle units sit on the integer lattice, width index outermost."""
        coords = grid_coords((2, 3), "rectangle")
        expected = jnp.array(
            [[0.0, 0.0], [0.0, 1.0], [0.0, 2.0], [1.0, 0.0], [1.0, 1.0], [1.0, 2.0]]
        )
        assert jnp.allclose(coords, expected)

    def test_hexagon_layout(self):
        """Odd rows shift by half a unit, rows pack at sqrt(3)/2."""
        coords = grid_coords((2, 2), "hexagon")
        expected = jnp.array(
            [
                [0.0, 0.0],
                [0.5, HEX_ROW_HEIGHT],
                [1.0, 0.0],
                [1.5, HEX_ROW_HEIGHT],
            ]
        )
        assert jnp.allclose(coords, expected)

    def test_hexagon_six_neighbours(self):
        """Interior hexagonal units have six neighbours at distance 1."""
        width, height = 5, 5
        coords = grid_coords((width, height), "hexagon")
        dist = grid_distances(coords)
        centre = 2 * height + 2  # unit (2, 2)
        n_neighbours = jnp.sum(jnp.isclose(dist[centre], 1.0))
        assert int(n_neighbours) == 6

    def test_rectangle_four_neighbours(self):
        coords = grid_coords((5, 5), "rectangle")
        dist = grid_distances(coords)
        centre = 2 * 5 + 2
        assert int(jnp.sum(jnp.isclose(dist[centre], 1.0))) == 4

    def test_zero_dimension(self):
        coords = grid_coords((0, 4))
        assert coords.shape == (0, 2)

    def test_accepts_numpy_dims(self):
        coords = grid_coords(np.array([3, 3]), "hexagon")
        assert coords.shape == (9, 2)

    @pytest.mark.parametrize("dims", [(3,), (2, 2, 2)])
    def test_invalid_dimension_count(self, dims):
        with pytest.raises(ValueError, match="Expected 2 grid dimensions"):
            grid_coords(dims)

    def test_negative_dimension(self):
        with pytest.raises(ValueError, match="non-negative"):
            grid_coords((-1, 3))

    @pytest.mark.parametrize("dims", [(2.7, 3), (3, 0.5)])
    def test_non_integer_dimension(self, dims):
        """Fractional dimensions are rejected, not truncated."""
        with pytest.raises(ValueError, match="must be integers"):
            grid_coords(dims)

    def test_integral_float_dimension(self):
        coords = grid_coords((3.0, 2.0))
        assert coords.shape == (6, 2)

    def test_default_shape_matches_map_config(self):
        """Called with dims only, the layout follows MapConfig's default shape."""
        config = MapConfig()
        coords = resolve(GRID_COORDS, config.grid)(config.dims)
        expected = grid_coords(config.dims, config.unit_shape)
        assert jnp.allclose(coords, expected)
        assert jnp.allclose(coords[1], jnp.array([0.5, HEX_ROW_HEIGHT]))

    def test_invalid_shape(self):
        with pytest.raises(ValueError, match="is not a valid UnitShape"):
            grid_coords((3, 3), "triangle")


class TestGridDistances:
    """Test pairwise unit distances."""

    def test_symmetric_zero_diagonal(self):
        dist = grid_distances(grid_coords((3, 4), "hexagon"))
        assert dist.shape == (12, 12)
        assert jnp.allclose(dist, dist.T)
        assert jnp.allclose(jnp.diag(dist), 0.0)

    def test_known_distance(self):
        coords = jnp.array([[0.0, 0.0], [3.0, 4.0]])
        dist = grid_distances(coords)
        assert jnp.allclose(dist[0, 1], 5.0)
