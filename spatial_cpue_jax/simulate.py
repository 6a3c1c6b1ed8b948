# spatial_cpue_jax/simulate.py
"""
Synthetic spatial CPUE data drawn from the model itself.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Optional, Tuple, Union

import jax.numpy as jnp
import numpy as np

from .core.data import CPUEData
from .core.params import CPUEParams
from .kernels.exponential import exponential_covariance
from .kernels.utils import pairwise_distances
from .likelihoods import get as get_likelihood
from .predictor import linear_predictor


def simulate(
    lat,
    lon,
    params: CPUEParams,
    likelihood: Union[int, str] = 1,
    *,
    seed: int = 0,
    dd=None,
    metric: str = "euclidean",
    u: Optional[np.ndarray] = None,
) -> Tuple[CPUEData, CPUEParams]:
    """
    Draw one dataset from the zero-inflated spatial model.

      u    ~ N(0, C(a))          (unless u is given)
      zero ~ Bernoulli(zero_prob)
      y    = 0 if zero else a draw from the positive kernel at pred

    Args:
        lat, lon: Coordinates (N,)
        params: True parameters; params.u is ignored
        likelihood: Kernel selector, 1 / "invgauss" or 2 / "lognormal"
        seed: numpy Generator seed
        dd: Precomputed distances; built from (lat, lon) with `metric` if None
        u: Fixed latent field instead of a fresh draw

    Returns:
        (data, true_params) where true_params carries the u that was used.
    """
    lik = get_likelihood(likelihood)
    rng = np.random.default_rng(seed)

    lat = np.asarray(lat, dtype=float)
    lon = np.asarray(lon, dtype=float)
    n = lat.shape[0]
    if dd is None:
        dd = pairwise_distances(lat, lon, metric=metric)
    dd = np.asarray(dd, dtype=float)

    if u is None:
        cov = np.asarray(exponential_covariance(dd, float(params.a)))
        u = rng.multivariate_normal(np.zeros(n), cov, method="cholesky")
    u = np.asarray(u, dtype=float)

    true_params = replace(params, u=jnp.asarray(u, dtype=jnp.result_type(float)))
    pred = np.asarray(linear_predictor(true_params, lat, lon))

    zero = rng.random(n) < float(true_params.zero_prob)
    positive = lik.sample(rng, pred, float(true_params.sigma))
    y = np.where(zero, 0.0, positive)

    data = CPUEData(
        y=jnp.asarray(y, dtype=jnp.result_type(float)),
        lat=jnp.asarray(lat, dtype=jnp.result_type(float)),
        lon=jnp.asarray(lon, dtype=jnp.result_type(float)),
        dd=jnp.asarray(dd, dtype=jnp.result_type(float)),
    )
    return data, true_params
