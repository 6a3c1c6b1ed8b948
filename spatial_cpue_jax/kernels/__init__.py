from .exponential import exponential_covariance
from .utils import pairwise_distances, EARTH_RADIUS_KM

__all__ = [
    "exponential_covariance",
    "pairwise_distances",
    "EARTH_RADIUS_KM",
]
