# spatial_cpue_jax/__init__.py
"""
Zero-inflated spatial CPUE likelihood in JAX.

    data  = make_data(y, lat, lon)
    nll, report = evaluate(CPUEParams.init(len(data)), data, ModelCFG(likelihood=1))
"""
from .core import CPUEData, CPUEParams, make_data
from .energy import (
    ModelCFG,
    CPUEReport,
    CPUESpatialObjective,
    SpatialFieldEnergy,
    ObservationEnergy,
    mvn_neg_log_density,
    evaluate,
    value_and_grad,
)
from .errors import (
    CPUEError,
    InvalidLikelihoodError,
    CovarianceNotPositiveDefiniteError,
    DataContractError,
    NonFiniteLikelihoodError,
)
from .kernels import exponential_covariance, pairwise_distances
from .likelihoods import log_density_invgauss, log_density_lognormal, zero_inflated_nll
from .predictor import linear_predictor
from .simulate import simulate

__version__ = "0.1.0"

__all__ = [
    "CPUEData",
    "CPUEParams",
    "make_data",
    "ModelCFG",
    "CPUEReport",
    "CPUESpatialObjective",
    "SpatialFieldEnergy",
    "ObservationEnergy",
    "mvn_neg_log_density",
    "evaluate",
    "value_and_grad",
    "CPUEError",
    "InvalidLikelihoodError",
    "CovarianceNotPositiveDefiniteError",
    "DataContractError",
    "NonFiniteLikelihoodError",
    "exponential_covariance",
    "pairwise_distances",
    "log_density_invgauss",
    "log_density_lognormal",
    "zero_inflated_nll",
    "linear_predictor",
    "simulate",
]
