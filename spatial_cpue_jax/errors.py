# spatial_cpue_jax/errors.py
"""Exception classes for spatial_cpue_jax."""


class CPUEError(Exception):
    """Base exception for spatial CPUE model errors."""
    pass


class InvalidLikelihoodError(CPUEError, ValueError):
    """Raised when the likelihood selector is not a registered kernel."""
    pass


class CovarianceNotPositiveDefiniteError(CPUEError, ArithmeticError):
    """Raised when the spatial covariance cannot be Cholesky-factorised.

    This is a failure of a single evaluation: the optimiser is expected
    to retreat from the offending parameter region.
    """
    pass


class DataContractError(CPUEError, ValueError):
    """Raised when observations, coordinates or distances are malformed."""
    pass


class NonFiniteLikelihoodError(CPUEError, FloatingPointError):
    """Raised when an evaluation produced a non-finite objective."""
    pass
