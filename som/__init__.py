"""
SOM: Self-Organizing Map configuration.

Option registries, configuration records and their validators, plus the
grid coordinate generator and neighbourhood functions the registries
resolve to.

Usage
-----
>>> import som
>>>
>>> # Validate before building the map
>>> map_config = som.MapConfig(dims=(10, 10), init_func=my_init)
>>> som.validate_map_config(map_config)
>>>
>>> # Resolve the validated grid to its coordinate generator
>>> coords_fn = som.resolve(som.GRID_COORDS, map_config.grid)
>>> coords = coords_fn(map_config.dims, map_config.unit_shape)
>>>
>>> # Validate before every training run
>>> train_config = som.TrainConfig(method="seq", radius=2.0)
>>> som.validate_train_config(train_config)
"""

import jax

# Enable float64 for grid coordinates and neighbourhood weights
jax.config.update("jax_enable_x64", True)

from .grid import grid_coords, grid_distances
from .neighbourhood import apply_neighbourhood, bubble, gaussian, mexican
from .options import (
    DecayStrategy,
    GridType,
    NeighbourhoodType,
    TrainingMethod,
    UnitShape,
)
from .registry import (
    DECAY_STRATEGIES,
    GRID_COORDS,
    NEIGHBOURHOODS,
    TRAINING_METHODS,
    UNIT_SHAPES,
    contains,
    resolve,
)
from .types import MapConfig, TrainConfig
from .validation import (
    ConfigError,
    ErrorKind,
    validate_map_config,
    validate_train_config,
)

try:
    from importlib.metadata import version

    __version__ = version("som")
except Exception:
    __version__ = "unknown"

__all__ = [
    # Types
    "MapConfig",
    "TrainConfig",
    # Options
    "UnitShape",
    "GridType",
    "NeighbourhoodType",
    "DecayStrategy",
    "TrainingMethod",
    # Registries
    "UNIT_SHAPES",
    "GRID_COORDS",
    "NEIGHBOURHOODS",
    "DECAY_STRATEGIES",
    "TRAINING_METHODS",
    "contains",
    "resolve",
    # Validation
    "ConfigError",
    "ErrorKind",
    "validate_map_config",
    "validate_train_config",
    # Grid
    "grid_coords",
    "grid_distances",
    # Neighbourhood functions
    "gaussian",
    "bubble",
    "mexican",
    "apply_neighbourhood",
]
