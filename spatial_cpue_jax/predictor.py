# spatial_cpue_jax/predictor.py
from __future__ import annotations

import jax.numpy as jnp

from .core.params import CPUEParams


def linear_predictor(params: CPUEParams, lat, lon) -> jnp.ndarray:
    """
    pred[i] = intercept + beta_lat * lat[i] + beta_lon * lon[i] + sigma_space * u[i]

    The result is on the link scale: the inverse-Gaussian kernel uses
    exp(pred) as its mean, the log-normal kernel uses pred as meanlog.
    """
    return (
        params.intercept
        + params.beta_lat * jnp.asarray(lat)
        + params.beta_lon * jnp.asarray(lon)
        + params.sigma_space * params.u
    )
