import jax.numpy as jnp
import numpy as np

from .densities import log_density_invgauss


class InverseGaussianLikelihood:
    """
    Inverse-Gaussian likelihood with log link:
        p(y | f, sigma) = IG(y; mean=exp(f), shape=sigma)
    """

    name = "invgauss"
    flag = 1

    @staticmethod
    def neg_loglik_1d(y, f, sigma):
        """
        y > 0
        """
        return -log_density_invgauss(y, jnp.exp(f), sigma)

    @staticmethod
    def sample(rng: np.random.Generator, f, sigma):
        # numpy's Wald(mean, scale) is IG(mean, shape=scale)
        return rng.wald(np.exp(np.asarray(f)), float(sigma))


invgauss = InverseGaussianLikelihood()
