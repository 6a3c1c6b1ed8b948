# spatial_cpue_jax/inference/base.py
from __future__ import annotations

from typing import Protocol, runtime_checkable, Any

from ..energy.base import EnergyTerm


@runtime_checkable
class InferenceMethod(Protocol):
    """
    Protocol for outer estimation methods.

    - An InferenceMethod consumes an EnergyTerm and returns estimates.
    - It MUST treat EnergyTerm as a black box (call it, differentiate it,
      nothing else).
    - It MUST NOT accept a non-finite energy as an improvement.
    """

    def run(self, energy: EnergyTerm, *args, **kwargs) -> Any:
        ...
