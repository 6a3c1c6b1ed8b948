# spatial_cpue_jax/likelihoods/zero_inflated.py
from __future__ import annotations

import jax
import jax.numpy as jnp


def zero_inflated_nll(y, pred, theta, sigma, likelihood) -> jnp.ndarray:
    """
    Per-observation negative log-likelihood of the zero-inflated model.

        y == 0 : -log(zero_prob)
        y  > 0 : -log(1 - zero_prob) - log p(y | pred, sigma)

    with zero_prob = sigmoid(theta). The split is an exact comparison with
    zero, no tolerance. Negative or non-finite observations have no
    density under either branch and contribute +inf.

    Args:
        y: Observations (N,)
        pred: Linear predictor on the link scale (N,)
        theta: Logit of zero_prob (scalar)
        sigma: Dispersion of the positive kernel (scalar)
        likelihood: Object with neg_loglik_1d(y, f, sigma)

    Returns:
        (N,) contributions; sum them for the observation NLL.
    """
    y = jnp.asarray(y)
    is_zero = y == 0
    invalid = ~jnp.isfinite(y) | (y < 0)

    # Kernel is evaluated everywhere; zero and invalid rows get a harmless
    # stand-in so neither the value nor its gradient picks up log(y <= 0).
    masked = is_zero | invalid
    y_safe = jnp.where(masked, jnp.ones_like(y), y)
    pred_safe = jnp.where(masked, jnp.zeros_like(pred), pred)
    kernel_nll = likelihood.neg_loglik_1d(y_safe, pred_safe, sigma)

    # -log(sigmoid(theta)) and -log(1 - sigmoid(theta))
    zero_term = -jax.nn.log_sigmoid(theta)
    positive_term = -jax.nn.log_sigmoid(-theta) + kernel_nll

    out = jnp.where(is_zero, zero_term, positive_term)
    return jnp.where(invalid, jnp.inf, out)
