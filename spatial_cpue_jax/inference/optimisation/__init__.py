# spatial_cpue_jax/inference/optimisation/__init__.py
"""
Outer optimisation of the spatial CPUE objective.

This module provides:
- JointMAP: joint-mode optimiser over fixed effects and the latent field
"""
from .joint import JointMAP, JointMAPCFG, JointMAPRun

__all__ = [
    "JointMAP", "JointMAPCFG", "JointMAPRun",
]
