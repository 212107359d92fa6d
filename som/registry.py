"""
Read-only registries of supported SOM options.

Registries map a symbolic name either to ``True`` (the option is
supported) or to the function implementing it. They are built once at
import time from the option enums and exposed as mapping proxies.
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from .grid import grid_coords
from .neighbourhood import NEIGHBOURHOODS
from .options import DecayStrategy, GridType, TrainingMethod, UnitShape
from .types import CoordsInitFunc

UNIT_SHAPES = MappingProxyType({shape.value: True for shape in UnitShape})

DECAY_STRATEGIES = MappingProxyType({decay.value: True for decay in DecayStrategy})

TRAINING_METHODS = MappingProxyType({method.value: True for method in TrainingMethod})

GRID_COORDS: Mapping[str, CoordsInitFunc] = MappingProxyType(
    {GridType.PLANAR.value: grid_coords}
)

__all__ = [
    "UNIT_SHAPES",
    "DECAY_STRATEGIES",
    "TRAINING_METHODS",
    "GRID_COORDS",
    "NEIGHBOURHOODS",
    "contains",
    "resolve",
]


def contains(registry: Mapping, name) -> bool:
    """
    Check whether name is a registered option.

    Option enum members match their symbolic names. Non-string names
    (None, numbers, unhashable values) are never members.
    """
    if not isinstance(name, str):
        return False
    if isinstance(name, Enum):
        name = name.value
    return name in registry


def resolve(registry: Mapping, name: str):
    """
    Look up the value registered under name.

    Parameters
    ----------
    registry : Mapping
        One of the option registries.
    name : str
        Option name.

    Returns
    -------
    object
        Registered function, or True for marker registries.

    Raises
    ------
    KeyError
        If name is not registered.
    """
    if not contains(registry, name):
        raise KeyError(f"Unknown option {name!r}, expected one of {sorted(registry)}")
    if isinstance(name, Enum):
        name = name.value
    return registry[name]
