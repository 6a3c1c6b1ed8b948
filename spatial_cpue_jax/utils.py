# spatial_cpue_jax/utils.py
"""
Numerical stability utilities for the spatial covariance.
"""
from __future__ import annotations

import jax.numpy as jnp


def cholesky(K: jnp.ndarray, jitter: float = 0.0) -> jnp.ndarray:
    """
    Lower Cholesky factor of a symmetric matrix, optionally with diagonal jitter.

    No jitter escalation is attempted: if K (+ jitter I) is not positive
    definite the returned factor contains NaN, and callers decide what that
    means. JIT-compatible.

    Args:
        K: Symmetric matrix (N, N)
        jitter: Value added to the diagonal before factorising (default: 0.0)

    Returns:
        L: Lower triangular factor (N, N), non-finite on failure
    """
    K = 0.5 * (K + K.T)
    if jitter:
        K = K + jitter * jnp.eye(K.shape[0], dtype=K.dtype)
    return jnp.linalg.cholesky(K)


def factor_is_valid(L: jnp.ndarray) -> jnp.ndarray:
    """True when a Cholesky factor is usable (finite, positive diagonal)."""
    return jnp.all(jnp.isfinite(L)) & jnp.all(jnp.diag(L) > 0)


def finite_or_inf(x: jnp.ndarray) -> jnp.ndarray:
    """Map NaN / -inf to +inf so a minimiser never accepts them."""
    return jnp.where(jnp.isfinite(x), x, jnp.inf)
