"""
Data structures for SOM configuration.

Both records are NamedTuples: immutable, and cheap to pass between the
grid builder, codebook initializer and training loop.
"""

from typing import Callable, NamedTuple

from jax import Array
from jax.typing import ArrayLike

# dims -> unit coordinates (n_units, 2)
CoordsInitFunc = Callable[..., Array]
# (distance, radius) -> weights
NeighbFunc = Callable[[ArrayLike, float], Array]
# (data, n_units) -> codebook (n_units, n_features)
CodebookInitFunc = Callable[..., Array]


class MapConfig(NamedTuple):
    """Immutable SOM map configuration."""

    dims: tuple[int, ...] = (10, 10)  # (width, height)
    grid: str = "planar"  # Grid coordinate system
    init_func: CodebookInitFunc | None = None  # Codebook initializer
    unit_shape: str = "hexagon"  # 'hexagon' or 'rectangle'


class TrainConfig(NamedTuple):
    """Immutable SOM training configuration."""

    method: str = "batch"  # 'seq' or 'batch'
    radius: float = 1.0  # Initial neighbourhood radius
    radius_decay: str = "exp"  # 'lin', 'exp' or 'inv'
    neighb_fn: str = "gaussian"  # 'gaussian', 'bubble' or 'mexican'
    learning_rate: float = 0.5  # Initial learning rate
    learning_rate_decay: str = "exp"  # 'lin', 'exp' or 'inv'
