# spatial_cpue_jax/likelihoods/densities.py
"""
Closed-form densities for strictly positive catches.

Both functions return the log-density by default and the density when
give_log=False. They are defined for x > 0 only; zero catches must be
routed away before calling them (see zero_inflated.py).
"""
from __future__ import annotations

import math

import jax.numpy as jnp
from jax.scipy.stats import norm

LOG_2PI = math.log(2.0 * math.pi)


def log_density_lognormal(x, meanlog, sdlog, give_log: bool = True) -> jnp.ndarray:
    """
    log f(x) = log N(log x; meanlog, sdlog) - log x
    """
    logx = jnp.log(x)
    logres = norm.logpdf(logx, loc=meanlog, scale=sdlog) - logx
    return logres if give_log else jnp.exp(logres)


def log_density_invgauss(x, mean, shape, give_log: bool = True) -> jnp.ndarray:
    """
    log f(x) = 0.5 log(shape) - 0.5 log(2π x³) - shape (x - mean)² / (2 mean² x)
    """
    logres = (
        0.5 * jnp.log(shape)
        - 0.5 * (LOG_2PI + 3.0 * jnp.log(x))
        - shape * (x - mean) ** 2 / (2.0 * mean ** 2 * x)
    )
    return logres if give_log else jnp.exp(logres)
