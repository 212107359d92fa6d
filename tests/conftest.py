"""Pytest configuration and shared fixtures."""

import jax
import jax.numpy as jnp
import pytest

from som.types import MapConfig, TrainConfig

# Ensure float64 is enabled for all tests
jax.config.update("jax_enable_x64", True)


def random_init(data, n_units):
    """Stand-in codebook initializer."""
    return jnp.zeros((n_units, data.shape[1]))


@pytest.fixture
def map_config():
    """Valid map configuration."""
    return MapConfig(dims=(10, 10), grid="planar", init_func=random_init, unit_shape="hexagon")


@pytest.fixture
def train_config():
    """Valid training configuration."""
    return TrainConfig(
        method="batch",
        radius=2.0,
        radius_decay="exp",
        neighb_fn="gaussian",
        learning_rate=0.5,
        learning_rate_decay="lin",
    )
