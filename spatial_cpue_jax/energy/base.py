# spatial_cpue_jax/energy/base.py
from __future__ import annotations

from typing import Protocol, runtime_checkable
import jax.numpy as jnp


@runtime_checkable
class EnergyTerm(Protocol):
    """
    Protocol for energy terms.

    Design principles
    -----------------
    - An EnergyTerm is a scalar-valued negative log-density.
    - It MUST be callable as E(params, data) and return a scalar
      `jnp.ndarray` with shape ().
    - It MUST be side-effect free so it can be traced by jit / grad.
    - Failures inside traced code are encoded as +inf, never raised.

    Optimisers MUST treat EnergyTerm as a black box and MUST NOT
    inspect or rely on any internal structure.
    """

    def __call__(self, params, data) -> jnp.ndarray:
        ...
