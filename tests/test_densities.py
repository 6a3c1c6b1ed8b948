import jax.numpy as jnp
import numpy as np
import pytest
from scipy import integrate, stats

from spatial_cpue_jax.likelihoods import (
    log_density_invgauss,
    log_density_lognormal,
    invgauss,
    lognormal,
)


X = jnp.array([0.05, 0.4, 1.0, 2.5, 11.0])


def test_lognormal_matches_scipy():
    meanlog, sdlog = 0.3, 0.7
    ours = log_density_lognormal(X, meanlog, sdlog)
    ref = stats.lognorm.logpdf(np.asarray(X), s=sdlog, scale=np.exp(meanlog))
    np.testing.assert_allclose(np.asarray(ours), ref, rtol=1e-10)


def test_invgauss_matches_scipy():
    mean, shape = 2.0, 3.0
    ours = log_density_invgauss(X, mean, shape)
    # scipy parameterises IG(mean, shape) as invgauss(mu=mean/shape, scale=shape)
    ref = stats.invgauss.logpdf(np.asarray(X), mu=mean / shape, scale=shape)
    np.testing.assert_allclose(np.asarray(ours), ref, rtol=1e-10)


def test_give_log_false_returns_density():
    np.testing.assert_allclose(
        np.asarray(log_density_lognormal(X, 0.1, 1.2, give_log=False)),
        np.exp(np.asarray(log_density_lognormal(X, 0.1, 1.2))),
    )
    np.testing.assert_allclose(
        np.asarray(log_density_invgauss(X, 1.5, 0.8, give_log=False)),
        np.exp(np.asarray(log_density_invgauss(X, 1.5, 0.8))),
    )


@pytest.mark.parametrize(
    "density, args",
    [
        (log_density_lognormal, (0.3, 0.7)),
        (log_density_lognormal, (-1.0, 0.25)),
        (log_density_invgauss, (2.0, 3.0)),
        (log_density_invgauss, (0.5, 10.0)),
    ],
)
def test_density_integrates_to_one(density, args):
    def pdf(x):
        return float(density(x, *args, give_log=False))

    total, err = integrate.quad(pdf, 0.0, np.inf, limit=200)
    assert total == pytest.approx(1.0, abs=1e-6)


def test_invgauss_stable_for_small_x_and_large_mean():
    x = jnp.array([1e-8, 1e-4, 1e3])
    out = log_density_invgauss(x, 1e4, 2.0)
    assert jnp.all(jnp.isfinite(out))


def test_likelihood_objects_use_link():
    y = jnp.array([0.7, 3.2])
    f = jnp.array([0.1, -0.4])
    sigma = 1.3
    np.testing.assert_allclose(
        np.asarray(invgauss.neg_loglik_1d(y, f, sigma)),
        -np.asarray(log_density_invgauss(y, jnp.exp(f), sigma)),
    )
    np.testing.assert_allclose(
        np.asarray(lognormal.neg_loglik_1d(y, f, sigma)),
        -np.asarray(log_density_lognormal(y, f, sigma)),
    )
