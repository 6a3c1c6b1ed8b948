# spatial_cpue_jax/inference/optimisation/joint.py
"""
Joint-mode optimisation of the spatial CPUE objective.

Minimises the joint negative log-likelihood over every parameter,
the latent field u included:

    params* = argmin_params E(params; data)

This is a reference outer optimiser. The objective itself knows nothing
about it; any gradient-based minimiser that consumes
`energy.value_and_grad` can be used instead.
"""
from __future__ import annotations

import warnings
from dataclasses import dataclass, replace
from typing import Any, Literal, Optional

import jax
import jax.numpy as jnp
import optax
from jax import lax
from jax.tree_util import tree_map, tree_leaves

from ...core.params import CPUEParams
from ...energy.base import EnergyTerm
from ...utils import finite_or_inf
from ..base import InferenceMethod


@dataclass(frozen=True)
class JointMAPCFG:
    """Configuration for joint-mode optimisation."""
    steps: int = 500
    lr: float = 1e-2
    optimizer: Literal["sgd", "adam", "rmsprop"] = "adam"
    clip_grad_norm: Optional[float] = None
    jit: bool = True
    # Keep the decay rate in the region where C(a) can be positive definite
    constrain_decay: bool = True
    min_decay: float = 1e-6


@dataclass
class JointMAPRun:
    """Joint-mode run results."""
    params: Any  # lowest finite-energy iterate
    energy_trace: jnp.ndarray  # shape [steps]
    grad_norm_trace: jnp.ndarray  # shape [steps]
    best_energy: jnp.ndarray


class JointMAP(InferenceMethod):
    """
    Joint-mode optimiser for (fixed effects, dispersion, decay, u).

    Non-finite energies (e.g. a covariance that failed to factorise) are
    recorded as +inf and their gradients zeroed; such iterates are never
    returned as the estimate.

    Examples:
        >>> objective = CPUESpatialObjective(ModelCFG(likelihood=2))
        >>> method = JointMAP(JointMAPCFG(steps=300, lr=5e-2))
        >>> result = method.run(objective, CPUEParams.init(len(data)), energy_args=(data,))
        >>> result.params.zero_prob
    """

    def __init__(self, cfg: JointMAPCFG = JointMAPCFG()):
        self.cfg = cfg

    def _get_optimizer(self, lr: float):
        """Get optimizer based on configuration."""
        if self.cfg.optimizer == "sgd":
            return optax.sgd(lr)
        elif self.cfg.optimizer == "adam":
            return optax.adam(lr)
        elif self.cfg.optimizer == "rmsprop":
            return optax.rmsprop(lr)
        else:
            raise ValueError(f"Unknown optimizer: {self.cfg.optimizer}")

    def _apply_constraints(self, params: CPUEParams) -> CPUEParams:
        """Clamp the decay rate to a >= min_decay; everything else is unconstrained."""
        if not self.cfg.constrain_decay:
            return params
        return replace(params, a=jnp.maximum(params.a, self.cfg.min_decay))

    def run(
        self,
        energy: EnergyTerm,
        params_init: CPUEParams,
        *,
        energy_args=(),
        energy_kwargs=None,
    ) -> JointMAPRun:
        """
        Run joint-mode optimisation.

        Args:
            energy: Energy to minimise, called as energy(params, *energy_args, **energy_kwargs)
            params_init: Starting parameters
            energy_args: Additional arguments for energy, typically (data,)
            energy_kwargs: Additional keyword arguments for energy

        Returns:
            JointMAPRun with the best parameters and energy / grad-norm traces
        """
        if energy_kwargs is None:
            energy_kwargs = {}

        cfg = self.cfg
        steps = cfg.steps
        clip_grad_norm = cfg.clip_grad_norm

        def energy_fn(params):
            return energy(params, *energy_args, **energy_kwargs)

        value_and_grad_fn = jax.value_and_grad(energy_fn)

        optimizer = self._get_optimizer(cfg.lr)
        params_init = self._apply_constraints(params_init)
        opt_state = optimizer.init(params_init)

        def global_grad_norm(grad):
            sq_sum = 0.0
            for leaf in tree_leaves(grad):
                sq_sum += jnp.sum(leaf ** 2)
            return jnp.sqrt(sq_sum)

        def clip_grads(grad):
            if clip_grad_norm is None:
                return grad
            norm = global_grad_norm(grad)
            factor = jnp.minimum(1.0, clip_grad_norm / (norm + 1e-16))
            return tree_map(lambda g: g * factor, grad)

        def update(params, opt_state, best_params, best_val):
            val, grad = value_and_grad_fn(params)

            finite = jnp.isfinite(val)
            val = finite_or_inf(val)
            grad = tree_map(lambda g: jnp.where(jnp.isfinite(g), g, 0.0), grad)
            grad = clip_grads(grad)
            grad_norm = global_grad_norm(grad)

            # best-so-far is judged on the point the energy was evaluated at
            improved = finite & (val < best_val)
            best_params = tree_map(lambda p, b: jnp.where(improved, p, b), params, best_params)
            best_val = jnp.where(improved, val, best_val)

            updates, opt_state = optimizer.update(grad, opt_state, params=params)
            params = optax.apply_updates(params, updates)
            params = self._apply_constraints(params)
            return params, opt_state, best_params, best_val, val, grad_norm

        energy_trace = jnp.zeros(steps)
        grad_norm_trace = jnp.zeros(steps)
        best_val = jnp.asarray(jnp.inf, dtype=energy_trace.dtype)

        if cfg.jit:
            def step(carry, _):
                params, opt_state, best_params, best_val, etrace, gtrace, i = carry
                params, opt_state, best_params, best_val, val, grad_norm = update(
                    params, opt_state, best_params, best_val
                )
                etrace = etrace.at[i].set(val)
                gtrace = gtrace.at[i].set(grad_norm)
                return (params, opt_state, best_params, best_val, etrace, gtrace, i + 1), None

            carry = (params_init, opt_state, params_init, best_val, energy_trace, grad_norm_trace, 0)
            (_, _, best_params, best_val, energy_trace, grad_norm_trace, _), _ = lax.scan(
                step, carry, None, length=steps
            )
        else:
            params = params_init
            best_params = params_init
            for i in range(steps):
                params, opt_state, best_params, best_val, val, grad_norm = update(
                    params, opt_state, best_params, best_val
                )
                energy_trace = energy_trace.at[i].set(val)
                grad_norm_trace = grad_norm_trace.at[i].set(grad_norm)

        if not bool(jnp.isfinite(best_val)):
            warnings.warn(
                "JointMAP never reached a finite energy; returning the initial parameters. "
                "Check the starting decay rate and the data.",
                RuntimeWarning,
            )

        return JointMAPRun(
            params=best_params,
            energy_trace=energy_trace,
            grad_norm_trace=grad_norm_trace,
            best_energy=best_val,
        )
