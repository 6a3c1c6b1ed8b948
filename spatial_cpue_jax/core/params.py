# spatial_cpue_jax/core/params.py
from __future__ import annotations

from dataclasses import dataclass, field

import jax
import jax.numpy as jnp
from jax.tree_util import register_pytree_node_class

# order of the scalar block in the flat parameter vector
SCALAR_FIELDS = (
    "intercept",
    "theta",
    "beta_lat",
    "beta_lon",
    "logsigma",
    "logsigma_space",
    "a",
)


def _scalar(x) -> jnp.ndarray:
    return jnp.asarray(x, dtype=jnp.result_type(float))


@register_pytree_node_class
@dataclass(frozen=True)
class CPUEParams:
    """
    Free parameters of the spatial CPUE model (pytree, JIT-friendly).

    All fields are unconstrained reals:
      - theta is the logit of zero_prob
      - logsigma / logsigma_space are log-scales
      - a is the spatial decay rate (>= 0 is the caller's responsibility)
      - u is the latent spatial field, one value per observation
    """

    intercept: jnp.ndarray = field(default_factory=lambda: _scalar(0.0))
    theta: jnp.ndarray = field(default_factory=lambda: _scalar(0.0))
    beta_lat: jnp.ndarray = field(default_factory=lambda: _scalar(0.0))
    beta_lon: jnp.ndarray = field(default_factory=lambda: _scalar(0.0))
    logsigma: jnp.ndarray = field(default_factory=lambda: _scalar(0.0))
    logsigma_space: jnp.ndarray = field(default_factory=lambda: _scalar(0.0))
    a: jnp.ndarray = field(default_factory=lambda: _scalar(1.0))
    u: jnp.ndarray = field(default_factory=lambda: jnp.zeros((0,), dtype=jnp.result_type(float)))

    # ---- derived quantities ----
    @property
    def zero_prob(self) -> jnp.ndarray:
        """1 / (1 + exp(-theta)), strictly inside (0, 1) for finite theta."""
        return jax.nn.sigmoid(self.theta)

    @property
    def sigma(self) -> jnp.ndarray:
        return jnp.exp(self.logsigma)

    @property
    def sigma_space(self) -> jnp.ndarray:
        return jnp.exp(self.logsigma_space)

    @classmethod
    def init(
        cls,
        n: int,
        *,
        intercept: float = 0.0,
        theta: float = 0.0,
        beta_lat: float = 0.0,
        beta_lon: float = 0.0,
        logsigma: float = 0.0,
        logsigma_space: float = 0.0,
        a: float = 1.0,
        u=None,
    ) -> CPUEParams:
        """Starting values for n observations; u defaults to zeros."""
        if u is None:
            u = jnp.zeros((n,), dtype=jnp.result_type(float))
        u = jnp.asarray(u, dtype=jnp.result_type(float))
        if u.shape != (n,):
            raise ValueError(f"u must have shape ({n},), got {u.shape}")
        return cls(
            intercept=_scalar(intercept),
            theta=_scalar(theta),
            beta_lat=_scalar(beta_lat),
            beta_lon=_scalar(beta_lon),
            logsigma=_scalar(logsigma),
            logsigma_space=_scalar(logsigma_space),
            a=_scalar(a),
            u=u,
        )

    # ---- flat views for vector-based optimisers ----
    def to_vector(self) -> jnp.ndarray:
        """[intercept, theta, beta_lat, beta_lon, logsigma, logsigma_space, a, u...]"""
        head = jnp.stack([jnp.asarray(getattr(self, name)) for name in SCALAR_FIELDS])
        return jnp.concatenate([head, jnp.asarray(self.u)])

    @classmethod
    def from_vector(cls, v) -> CPUEParams:
        v = jnp.asarray(v)
        k = len(SCALAR_FIELDS)
        if v.ndim != 1 or v.shape[0] < k:
            raise ValueError(f"Expected a flat vector of length >= {k}, got shape {v.shape}")
        scalars = {name: v[i] for i, name in enumerate(SCALAR_FIELDS)}
        return cls(**scalars, u=v[k:])

    # ---- pytree protocol ----
    def tree_flatten(self):
        children = (
            self.intercept,
            self.theta,
            self.beta_lat,
            self.beta_lon,
            self.logsigma,
            self.logsigma_space,
            self.a,
            self.u,
        )
        return children, None

    @classmethod
    def tree_unflatten(cls, aux_data, children):
        return cls(*children)
