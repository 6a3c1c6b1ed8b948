# spatial_cpue_jax/energy/__init__.py
from __future__ import annotations

from .base import EnergyTerm
from .prior import SpatialFieldEnergy, mvn_neg_log_density
from .inertial import ObservationEnergy
from .objective import (
    ModelCFG,
    CPUEReport,
    CPUESpatialObjective,
    evaluate,
    value_and_grad,
)

__all__ = [
    "EnergyTerm",
    "SpatialFieldEnergy",
    "mvn_neg_log_density",
    "ObservationEnergy",
    "ModelCFG",
    "CPUEReport",
    "CPUESpatialObjective",
    "evaluate",
    "value_and_grad",
]
