"""
Option sets accepted by SOM map and training configuration.

Every option is a str enum so members compare equal to their symbolic
names, e.g. ``UnitShape.HEXAGON == "hexagon"``.
"""

from enum import Enum


class UnitShape(str, Enum):
    """SOM unit shapes."""

    HEXAGON = "hexagon"
    RECTANGLE = "rectangle"


class GridType(str, Enum):
    """SOM grid coordinate systems."""

    PLANAR = "planar"


class NeighbourhoodType(str, Enum):
    """SOM neighbourhood functions."""

    GAUSSIAN = "gaussian"
    BUBBLE = "bubble"
    MEXICAN = "mexican"


class DecayStrategy(str, Enum):
    """Radius and learning rate decay strategies."""

    LINEAR = "lin"
    EXPONENTIAL = "exp"
    INVERSE = "inv"


class TrainingMethod(str, Enum):
    """SOM training methods."""

    SEQUENTIAL = "seq"
    BATCH = "batch"
