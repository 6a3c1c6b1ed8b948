import numpy as np

from .densities import log_density_lognormal


class LogNormalLikelihood:
    """
    Log-normal likelihood, f is the mean of log y:
        p(y | f, sigma) = LogNormal(y; meanlog=f, sdlog=sigma)
    """

    name = "lognormal"
    flag = 2

    @staticmethod
    def neg_loglik_1d(y, f, sigma):
        """
        y > 0
        """
        return -log_density_lognormal(y, f, sigma)

    @staticmethod
    def sample(rng: np.random.Generator, f, sigma):
        return rng.lognormal(np.asarray(f), float(sigma))


lognormal = LogNormalLikelihood()
