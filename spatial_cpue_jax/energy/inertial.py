# spatial_cpue_jax/energy/inertial.py
from __future__ import annotations

import jax.numpy as jnp

from .base import EnergyTerm
from ..likelihoods.zero_inflated import zero_inflated_nll
from ..predictor import linear_predictor


class ObservationEnergy(EnergyTerm):
    """
    Data-dependent energy.

    This term is the observation contribution only:
        E_obs(params; data) = Σ_i -log p(y_i | pred_i, zero_prob, sigma)

    where each p is the zero-inflated mixture of a point mass at zero and
    the selected positive kernel. The spatial prior on u is composed
    elsewhere (see objective.py).
    """

    def __init__(self, likelihood):
        self.likelihood = likelihood

    def per_observation(self, params, data) -> jnp.ndarray:
        pred = linear_predictor(params, data.lat, data.lon)
        return zero_inflated_nll(
            data.y,
            pred,
            params.theta,
            params.sigma,
            self.likelihood,
        )

    def __call__(self, params, data) -> jnp.ndarray:
        return jnp.sum(self.per_observation(params, data))
