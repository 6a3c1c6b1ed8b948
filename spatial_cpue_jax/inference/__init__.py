# spatial_cpue_jax/inference/__init__.py
from __future__ import annotations

"""
Inference layer.

Methods here consume an EnergyTerm (see energy.objective) and never look
inside it, so the objective can be swapped without touching the optimiser.
"""

from .base import InferenceMethod
from .optimisation import JointMAP, JointMAPCFG, JointMAPRun

__all__ = [
    "InferenceMethod",
    "JointMAP", "JointMAPCFG", "JointMAPRun",
]
