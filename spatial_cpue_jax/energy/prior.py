# spatial_cpue_jax/energy/prior.py
"""
Spatial prior energy on the latent field u.

Because neighbouring locations are correlated, u is penalised jointly under
a zero-mean multivariate normal with exponential-decay covariance rather
than as a sum of independent per-location terms.
"""
from __future__ import annotations

import math

import jax.numpy as jnp
from jax.scipy.linalg import solve_triangular

from .base import EnergyTerm
from ..kernels.exponential import exponential_covariance
from ..utils import cholesky, factor_is_valid

LOG_2PI = math.log(2.0 * math.pi)


def mvn_neg_log_density(u, cov, jitter: float = 0.0) -> jnp.ndarray:
    """
    -log N(u; 0, cov)
      = 0.5 * [ n log(2π) + log|cov| + uᵀ cov⁻¹ u ]

    Computed from the Cholesky factor cov = L Lᵀ:
      log|cov|    = 2 Σ log L_ii
      uᵀ cov⁻¹ u  = ||L⁻¹ u||²

    Returns +inf when cov is not positive definite (the factorisation
    produced non-finite entries). Cost is O(n³).
    """
    u = jnp.asarray(u)
    n = u.shape[0]

    L = cholesky(cov, jitter=jitter)
    ok = factor_is_valid(L)

    # Substitute the identity for a failed factor so the masked branch
    # stays finite and does not poison gradients.
    L_safe = jnp.where(ok, L, jnp.eye(n, dtype=L.dtype))
    alpha = solve_triangular(L_safe, u, lower=True)

    logdet = 2.0 * jnp.sum(jnp.log(jnp.diag(L_safe)))
    quad = jnp.dot(alpha, alpha)
    nll = 0.5 * (n * LOG_2PI + logdet + quad)

    return jnp.where(ok, nll, jnp.inf)


class SpatialFieldEnergy(EnergyTerm):
    """
    E_spatial(params; data) = -log N(u; 0, C(a)),  C(a)_ij = exp(-a * dd_ij)
    """

    def __init__(self, jitter: float = 0.0):
        self.jitter = jitter

    def covariance(self, params, data) -> jnp.ndarray:
        return exponential_covariance(data.dd, params.a)

    def __call__(self, params, data) -> jnp.ndarray:
        cov = self.covariance(params, data)
        return mvn_neg_log_density(params.u, cov, jitter=self.jitter)
