# spatial_cpue_jax/core/data.py
"""
Data view layer.

CPUEData bundles the observation vector, the per-observation coordinates
and the precomputed pairwise distance matrix. It is a pytree so it can be
passed straight through jit / grad alongside the parameters; it makes no
probabilistic decisions.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import jax.numpy as jnp
import numpy as np
from jax.tree_util import register_pytree_node_class

from ..errors import DataContractError
from ..kernels.utils import pairwise_distances


@register_pytree_node_class
@dataclass(frozen=True)
class CPUEData:
    """
    Spatial CPUE observations.

    - y: catches (N,), zero for "no catch", positive otherwise
    - lat, lon: coordinates (N,)
    - dd: pairwise distances (N, N), symmetric with zero diagonal
    """
    y: jnp.ndarray
    lat: jnp.ndarray
    lon: jnp.ndarray
    dd: jnp.ndarray

    def validate(self) -> CPUEData:
        """
        Check the data contract eagerly (not traceable).

        Raises:
            DataContractError: on shape mismatches, negative or non-finite
                catches, non-finite coordinates, or a malformed distance matrix.
        """
        y = np.asarray(self.y)
        lat = np.asarray(self.lat)
        lon = np.asarray(self.lon)
        dd = np.asarray(self.dd)

        if y.ndim != 1:
            raise DataContractError(f"y must be 1-D, got shape {y.shape}")
        n = y.shape[0]
        if lat.shape != (n,) or lon.shape != (n,):
            raise DataContractError(
                f"lat/lon must have shape ({n},), got {lat.shape} and {lon.shape}"
            )
        if dd.shape != (n, n):
            raise DataContractError(f"dd must have shape ({n}, {n}), got {dd.shape}")
        if not (np.all(np.isfinite(lat)) and np.all(np.isfinite(lon))):
            raise DataContractError("lat/lon contain non-finite coordinates")
        if not np.all(np.isfinite(y)):
            raise DataContractError("y contains non-finite values")
        if np.any(y < 0):
            raise DataContractError("y contains negative catches; only exact zeros or positive values are allowed")
        if not (np.all(np.isfinite(dd)) and np.all(dd >= 0)):
            raise DataContractError("dd must be finite and non-negative")
        return self

    def batch(self, idx: Union[jnp.ndarray, slice]) -> CPUEData:
        """Subset view; the distance matrix is sliced on both axes."""
        idx = jnp.arange(len(self))[idx]
        return CPUEData(
            y=self.y[idx],
            lat=self.lat[idx],
            lon=self.lon[idx],
            dd=self.dd[idx][:, idx],
        )

    def __len__(self) -> int:
        return self.y.shape[0]

    # ---- pytree protocol ----
    def tree_flatten(self):
        return (self.y, self.lat, self.lon, self.dd), None

    @classmethod
    def tree_unflatten(cls, aux_data, children):
        return cls(*children)


def make_data(y, lat, lon, dd=None, *, metric: str = "euclidean") -> CPUEData:
    """
    Build CPUEData from array-likes, computing dd from (lat, lon) if omitted.
    """
    y = jnp.asarray(y, dtype=jnp.result_type(float))
    lat = jnp.asarray(lat, dtype=jnp.result_type(float))
    lon = jnp.asarray(lon, dtype=jnp.result_type(float))
    if dd is None:
        dd = pairwise_distances(lat, lon, metric=metric)
    dd = jnp.asarray(dd, dtype=jnp.result_type(float))
    return CPUEData(y=y, lat=lat, lon=lon, dd=dd)


__all__ = [
    "CPUEData",
    "make_data",
]
