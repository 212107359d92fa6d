"""
Validation of SOM map and training configuration.

Checks run in a fixed order and stop at the first violation, which is
raised as a ConfigError carrying its kind and the offending value. Values
are never corrected.
"""

import logging
from enum import Enum

from .registry import (
    DECAY_STRATEGIES,
    GRID_COORDS,
    NEIGHBOURHOODS,
    TRAINING_METHODS,
    UNIT_SHAPES,
    contains,
)
from .types import MapConfig, TrainConfig

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Configuration error kinds, one per validation rule."""

    INVALID_DIMENSION_COUNT = "InvalidDimensionCount"
    INVALID_DIMENSIONS = "InvalidDimensions"
    UNSUPPORTED_GRID = "UnsupportedGrid"
    MISSING_INIT_FUNC = "MissingInitFunc"
    UNSUPPORTED_SHAPE = "UnsupportedShape"
    UNSUPPORTED_METHOD = "UnsupportedMethod"
    INVALID_RADIUS = "InvalidRadius"
    UNSUPPORTED_RADIUS_DECAY = "UnsupportedRadiusDecay"
    UNSUPPORTED_NEIGHB_FN = "UnsupportedNeighbFn"
    INVALID_LEARNING_RATE = "InvalidLearningRate"
    UNSUPPORTED_LEARNING_RATE_DECAY = "UnsupportedLearningRateDecay"


class ConfigError(ValueError):
    """
    Invalid SOM configuration.

    Attributes
    ----------
    kind : ErrorKind
        Which rule was violated.
    detail : object
        Offending value or name (None when there is nothing to report).
    """

    def __init__(self, kind: ErrorKind, message: str, detail=None):
        super().__init__(message)
        self.kind = kind
        self.detail = detail


def _reject(kind: ErrorKind, message: str, detail=None) -> ConfigError:
    logger.debug("Rejected SOM config: %s (%r)", kind.value, detail)
    return ConfigError(kind, message, detail)


def validate_map_config(config: MapConfig) -> None:
    """
    Validate SOM map configuration.

    Parameters
    ----------
    config : MapConfig
        Map configuration to check.

    Raises
    ------
    ConfigError
        On the first invalid field, in order: dims count, dims sign, grid,
        init_func, unit_shape.
    """
    # TODO: support 3D maps once grid_coords can lay them out
    # Absent dims count as zero dimensions
    n_dims = len(config.dims) if config.dims is not None else 0
    if n_dims != 2:
        raise _reject(
            ErrorKind.INVALID_DIMENSION_COUNT,
            f"Incorrect number of dimensions supplied: {n_dims}",
            n_dims,
        )

    # Zero-sized dimensions pass, only negative ones are rejected
    dims = tuple(config.dims)
    if any(dim < 0 for dim in dims):
        raise _reject(
            ErrorKind.INVALID_DIMENSIONS,
            f"Incorrect SOM dimensions supplied: {dims}",
            dims,
        )

    if not contains(GRID_COORDS, config.grid):
        raise _reject(
            ErrorKind.UNSUPPORTED_GRID,
            f"Unsupported SOM grid type: {config.grid}",
            config.grid,
        )

    if config.init_func is None or not callable(config.init_func):
        raise _reject(
            ErrorKind.MISSING_INIT_FUNC,
            f"Invalid codebook init function: {config.init_func!r}",
            config.init_func,
        )

    if not contains(UNIT_SHAPES, config.unit_shape):
        raise _reject(
            ErrorKind.UNSUPPORTED_SHAPE,
            f"Unsupported SOM unit shape: {config.unit_shape}",
            config.unit_shape,
        )

    logger.debug(
        "Accepted SOM map config: dims=%s grid=%s shape=%s",
        dims,
        config.grid,
        config.unit_shape,
    )


def validate_train_config(config: TrainConfig) -> None:
    """
    Validate SOM training configuration.

    Parameters
    ----------
    config : TrainConfig
        Training configuration to check.

    Raises
    ------
    ConfigError
        On the first invalid field, in order: method, radius, radius_decay,
        neighb_fn, learning_rate, learning_rate_decay.
    """
    if not contains(TRAINING_METHODS, config.method):
        raise _reject(
            ErrorKind.UNSUPPORTED_METHOD,
            f"Invalid SOM training method: {config.method}",
            config.method,
        )

    if config.radius < 0:
        raise _reject(
            ErrorKind.INVALID_RADIUS,
            f"Invalid SOM unit radius: {config.radius}",
            config.radius,
        )

    if not contains(DECAY_STRATEGIES, config.radius_decay):
        raise _reject(
            ErrorKind.UNSUPPORTED_RADIUS_DECAY,
            f"Unsupported radius decay strategy: {config.radius_decay}",
            config.radius_decay,
        )

    if not contains(NEIGHBOURHOODS, config.neighb_fn):
        raise _reject(
            ErrorKind.UNSUPPORTED_NEIGHB_FN,
            f"Unsupported neighbourhood function: {config.neighb_fn}",
            config.neighb_fn,
        )

    if config.learning_rate < 0:
        raise _reject(
            ErrorKind.INVALID_LEARNING_RATE,
            f"Invalid SOM learning rate: {config.learning_rate}",
            config.learning_rate,
        )

    if not contains(DECAY_STRATEGIES, config.learning_rate_decay):
        raise _reject(
            ErrorKind.UNSUPPORTED_LEARNING_RATE_DECAY,
            f"Unsupported learning rate decay strategy: {config.learning_rate_decay}",
            config.learning_rate_decay,
        )

    logger.debug(
        "Accepted SOM train config: method=%s radius=%s lrate=%s",
        config.method,
        config.radius,
        config.learning_rate,
    )
