# spatial_cpue_jax/kernels/exponential.py
import jax.numpy as jnp


def exponential_covariance(dd, a):
    """
    Exponential-decay spatial correlation from a distance matrix:
        cov[i, i] = 1
        cov[i, j] = cov[j, i] = exp(-a * dd[i, j])   (i > j)

    Only the strict lower triangle of dd is read, so cov is symmetric by
    construction. dd is not validated.
    """
    dd = jnp.asarray(dd)
    n = dd.shape[0]
    lower = jnp.tril(jnp.exp(-a * dd), k=-1)
    return lower + lower.T + jnp.eye(n, dtype=lower.dtype)
