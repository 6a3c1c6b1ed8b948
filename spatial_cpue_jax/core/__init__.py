# spatial_cpue_jax/core/__init__.py
from .data import CPUEData, make_data
from .params import CPUEParams

__all__ = [
    "CPUEData",
    "CPUEParams",
    "make_data",
]
