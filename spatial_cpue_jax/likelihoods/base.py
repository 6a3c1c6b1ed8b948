# spatial_cpue_jax/likelihoods/base.py
from ..errors import InvalidLikelihoodError

_LIKELIHOOD_REGISTRY = {}


def register(name, likelihood):
    """
    Register a positive-catch likelihood under a string key or integer flag.
    """
    if name in _LIKELIHOOD_REGISTRY:
        raise KeyError(f"Likelihood '{name}' already registered.")
    _LIKELIHOOD_REGISTRY[name] = likelihood


def get(name):
    """
    Retrieve a likelihood by integer flag (1, 2) or by name.

    Raises:
        InvalidLikelihoodError: for any selector that is not registered.
    """
    # bool hashes like 0/1 and would otherwise alias flag 1
    if isinstance(name, bool):
        raise InvalidLikelihoodError(f"Invalid likelihood selector {name!r}.")
    try:
        return _LIKELIHOOD_REGISTRY[name]
    except (KeyError, TypeError):
        raise InvalidLikelihoodError(
            f"Invalid likelihood selector {name!r}. "
            f"Available: {available()}"
        ) from None


def available():
    return list(_LIKELIHOOD_REGISTRY.keys())
