# spatial_cpue_jax/likelihoods/__init__.py

from .base import register, get, available

from .densities import log_density_lognormal, log_density_invgauss
from .invgauss import invgauss, InverseGaussianLikelihood
from .lognormal import lognormal, LogNormalLikelihood
from .zero_inflated import zero_inflated_nll

# --------------------------------------------------
# Registry: integer flags and names resolve to the same kernel
# --------------------------------------------------
for _lik in (invgauss, lognormal):
    register(_lik.flag, _lik)
    register(_lik.name, _lik)

__all__ = [
    "get",
    "available",
    "log_density_lognormal",
    "log_density_invgauss",
    "invgauss",
    "lognormal",
    "InverseGaussianLikelihood",
    "LogNormalLikelihood",
    "zero_inflated_nll",
]
